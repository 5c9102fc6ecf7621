# models.py
# MongoDB User Schema for the EcoImpact action store (for documentation/reference)

user_schema = {
    '_id': 'str',  # userId sent by the client
    'username': 'str',  # Display name, defaults to the userId
    'eco_points': 0,  # Integer, total eco points
    'badges': [
        'str'  # Badge names (e.g., 'eco_beginner')
    ],
    'action_history': [
        {
            'timestamp': 'str',  # Submission time (YYYY-MM-DD HH:MM:SS)
            'action_type': 'str',  # One of ACTION_TYPES (free text is accepted)
            'location': {'lat': 0.0, 'lng': 0.0},  # As sent by the browser
            'points_earned': 0  # Points earned for this action
        }
    ]
}

# Leaderboard entry as returned by /api/eco-impact/leaderboard
leaderboard_entry_schema = {
    'userId': 'str',
    'username': 'str',
    'points': 0,
    'badges': ['str']
}

# Choices offered by the AgriVision and EcoImpact forms
SOIL_TEXTURES = [
    'Sandy',
    'Loamy',
    'Clay',
    'Silty',
    'Peaty',
    'Chalky',
    'Sandy Loam',
    'Clay Loam',
    'Silt Loam',
]

ACTION_TYPES = [
    'Tree Planting',
    'Energy Conservation',
    'Waste Reduction',
    'Sustainable Transport',
    'Water Conservation',
    'Renewable Energy Usage',
]
