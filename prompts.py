from util import image_excerpt, to_json

WELLNESS_SYSTEM_PROMPT = (
    "You are a health and wellness advisor. "
    "Provide personalized recommendations based on environmental data."
)

SOIL_SYSTEM_PROMPT = (
    "You are an agricultural expert. "
    "Analyze soil conditions and provide farming recommendations."
)

ACTION_SYSTEM_PROMPT = (
    "You are an environmental action validator. "
    "Verify if the submitted image shows genuine eco-friendly actions."
)


def wellness_prompt(environmental_data):
    return (
        f"Based on this environmental data: {to_json(environmental_data)}, "
        "what are your health and wellness recommendations?"
    )


def soil_prompt(image_base64, soil_texture, environmental_data):
    return (
        f"Based on this soil image ({image_excerpt(image_base64)}), "
        f"soil texture: {soil_texture}, "
        f"and environmental data: {to_json(environmental_data)}, "
        "what are your recommendations for crops and farming practices?"
    )


def action_prompt(image_base64, action_type, location):
    return (
        f"Verify this environmental action. Image: {image_excerpt(image_base64)}, "
        f"Action Type: {action_type}, Location: {to_json(location)}"
    )
