"""Optional MongoDB store for EcoImpact submissions, points and badges.

Nothing is stored unless MONGO_URI is set; the leaderboard is then empty.
"""

import logging
from datetime import datetime

from pymongo import DESCENDING, MongoClient, ReturnDocument

import config

logger = logging.getLogger("ecosense.store")

POINTS_MAP = {
    'tree planting': 25,
    'renewable energy usage': 20,
    'energy conservation': 15,
    'sustainable transport': 15,
    'waste reduction': 10,
    'water conservation': 10,
}
DEFAULT_POINTS = 5

# (badge, minimum) pairs
POINT_BADGES = [('eco_beginner', 100), ('eco_enthusiast', 500), ('eco_master', 1000)]
ACTION_BADGES = [('action_starter', 10), ('action_hero', 50), ('action_warrior', 100)]

_users_collection = None


def get_users_collection():
    """Connect on first use; returns None when no MONGO_URI is configured."""
    global _users_collection
    if _users_collection is None and config.MONGO_URI:
        client = MongoClient(config.MONGO_URI, serverSelectionTimeoutMS=5000)
        _users_collection = client[config.MONGO_DB]["users"]
        logger.info("Connected action store to MongoDB database %s", config.MONGO_DB)
    return _users_collection


def set_users_collection(collection):
    global _users_collection
    _users_collection = collection


def get_points_for_action_type(action_type):
    return POINTS_MAP.get((action_type or '').lower(), DEFAULT_POINTS)


def earned_badges(user):
    """Badges the user qualifies for, keeping any they already hold."""
    badges = list(user.get('badges', []))
    points = user.get('eco_points', 0)
    actions = len(user.get('action_history', []))
    for badge, minimum in POINT_BADGES:
        if points >= minimum and badge not in badges:
            badges.append(badge)
    for badge, minimum in ACTION_BADGES:
        if actions >= minimum and badge not in badges:
            badges.append(badge)
    return badges


def record_action(user_id, action_type, location, username=None):
    """Store one submission and return the updated user, or None when disabled."""
    users = get_users_collection()
    if users is None:
        return None
    points_earned = get_points_for_action_type(action_type)
    new_activity = {
        'timestamp': datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
        'action_type': action_type,
        'location': location,
        'points_earned': points_earned,
    }
    user = users.find_one_and_update(
        {'_id': user_id},
        {
            '$push': {'action_history': new_activity},
            '$inc': {'eco_points': points_earned},
            '$setOnInsert': {'username': username or user_id, 'badges': []},
        },
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    badges = earned_badges(user)
    new_badges = [badge for badge in badges if badge not in user.get('badges', [])]
    if new_badges:
        # $addToSet so overlapping submissions never drop each other's badges
        users.update_one({'_id': user_id}, {'$addToSet': {'badges': {'$each': new_badges}}})
        user['badges'] = badges
    logger.info("Recorded %r for %s (+%d points)", action_type, user_id, points_earned)
    return user


def leaderboard(limit=10):
    users = get_users_collection()
    if users is None:
        return []
    top = users.find().sort('eco_points', DESCENDING).limit(limit)
    return [
        {
            'userId': str(user['_id']),
            'username': user.get('username', str(user['_id'])),
            'points': user.get('eco_points', 0),
            'badges': user.get('badges', []),
        }
        for user in top
    ]
