from flask import Flask, request, render_template, jsonify
from flask_cors import CORS
import logging

import config
import ambee
import openrouter
import prompts
import store
from models import SOIL_TEXTURES, ACTION_TYPES
from util import UNDEFINED

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger("ecosense")

application = Flask(__name__)
CORS(application, resources={r"/api/*": {"origins": "*"}})


def get_body():
    # accepts JSON as well as form posts; a missing body is an empty dict
    return request.get_json(silent=True) or request.form.to_dict()


# pages
@application.route("/")
def eco_wellness():
    return render_template("eco_wellness.html")

@application.route("/agri-vision")
def agri_vision():
    return render_template("agri_vision.html", soil_textures=SOIL_TEXTURES)

@application.route("/eco-impact")
def eco_impact():
    return render_template("eco_impact.html", action_types=ACTION_TYPES)

@application.route("/health")
def health():
    return jsonify({'status': 'healthy'}), 200


# EcoWellness: environmental data based on location
@application.route("/api/eco-wellness/environment/<lat>/<lng>", methods=["GET"])
def environment(lat, lng):
    try:
        air_quality = ambee.air_quality(lat, lng)
        pollen = ambee.pollen(lat, lng)
        weather = ambee.weather(lat, lng)
        return jsonify({
            'airQuality': air_quality,
            'pollen': pollen,
            'weather': weather
        })
    except Exception:
        logger.exception("Error fetching environmental data")
        return jsonify({'error': 'Failed to fetch environmental data'}), 500

# EcoWellness: personalized recommendations
@application.route("/api/eco-wellness/recommendations", methods=["POST"])
def recommendations():
    try:
        data = get_body()
        completion = openrouter.chat_completion(
            prompts.WELLNESS_SYSTEM_PROMPT,
            prompts.wellness_prompt(data.get('environmentalData', UNDEFINED)),
        )
        return jsonify(completion)
    except Exception:
        logger.exception("Error getting recommendations")
        return jsonify({'error': 'Failed to get recommendations'}), 500

# AgriVision: analyze soil and provide recommendations
@application.route("/api/agri-vision/analyze", methods=["POST"])
def analyze_soil():
    try:
        data = get_body()
        location = data['location']
        environmental_data = ambee.weather(location['lat'], location['lng'])
        completion = openrouter.chat_completion(
            prompts.SOIL_SYSTEM_PROMPT,
            prompts.soil_prompt(data['imageBase64'], data.get('soilTexture', UNDEFINED), environmental_data),
        )
        return jsonify(completion)
    except Exception:
        logger.exception("Error analyzing soil")
        return jsonify({'error': 'Failed to analyze soil'}), 500

# EcoImpact: submit eco-friendly action
@application.route("/api/eco-impact/submit-action", methods=["POST"])
def submit_action():
    try:
        data = get_body()
        action_type = data.get('actionType')
        location = data.get('location')
        verification = openrouter.chat_completion(
            prompts.ACTION_SYSTEM_PROMPT,
            prompts.action_prompt(
                data['imageBase64'],
                data.get('actionType', UNDEFINED),
                data.get('location', UNDEFINED),
            ),
        )
        result = {
            'status': 'success',
            'verification': verification
        }
        user_id = data.get('userId')
        if user_id:
            user = store.record_action(user_id, action_type, location, username=data.get('username'))
            if user is not None:
                result['eco_points'] = user['eco_points']
        return jsonify(result)
    except Exception:
        logger.exception("Error submitting eco action")
        return jsonify({'error': 'Failed to submit eco action'}), 500

# EcoImpact: leaderboard
@application.route("/api/eco-impact/leaderboard", methods=["GET"])
def leaderboard():
    try:
        return jsonify({'leaderboard': store.leaderboard()})
    except Exception:
        logger.exception("Error fetching leaderboard")
        return jsonify({'error': 'Failed to fetch leaderboard'}), 500


# here is route of 404 means page not found error
@application.errorhandler(404)
def page_not_found(e):
    if request.path.startswith("/api/"):
        return jsonify({'error': 'Not found'}), 404
    return render_template("404.html"), 404


if __name__ == "__main__":
    logger.info("Server running on port %s", config.PORT)
    application.run(port=config.PORT)
