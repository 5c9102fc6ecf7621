import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

PORT = int(os.environ.get("PORT", 5000))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

AMBEE_API_KEY = os.environ.get("AMBEE_API_KEY")
AMBEE_BASE_URL = os.environ.get("AMBEE_BASE_URL", "https://api.ambeedata.com")

OPENROUTER_API_KEY = os.environ.get("OPENROUTER_API_KEY")
OPENROUTER_BASE_URL = os.environ.get("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
OPENROUTER_MODEL = os.environ.get("OPENROUTER_MODEL", "anthropic/claude-2")

# seconds, applied to every outbound call
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", 30))

# leave MONGO_URI unset to run without the action store
MONGO_URI = os.environ.get("MONGO_URI")
MONGO_DB = os.environ.get("MONGO_DB", "eco_impact")
