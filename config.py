"""
Runtime configuration, read from the environment (and a local .env file)
"""
import os
from dotenv import load_dotenv

# Load environment
load_dotenv()

DATABASE_URL = os.getenv(
    "DATABASE_URL", "mysql+pymysql://root:@localhost:3306/dailyplanner_db"
)
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Planner key-value storage file
PLANNER_DATA_PATH = os.getenv("PLANNER_DATA_PATH", "planner_data.json")
