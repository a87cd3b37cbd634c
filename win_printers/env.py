import os
from dotenv import load_dotenv

load_dotenv()  # lee .env del cwd

POWERSHELL_EXE = os.getenv("POWERSHELL_EXE", "Powershell.exe")

PRINT_AGENT_TOKEN = os.getenv("PRINT_AGENT_TOKEN", "")
PRINT_AGENT_URL = os.getenv("PRINT_AGENT_URL", "http://127.0.0.1:9001")
AGENT_ID = os.getenv("AGENT_ID", "agent-unknown")
AGENT_NAME = os.getenv("AGENT_NAME", AGENT_ID)
AGENT_HOST = os.getenv("AGENT_HOST", "127.0.0.1")
AGENT_PORT = int(os.getenv("AGENT_PORT", "9001"))

AUDIT_LOG_PATH = os.getenv("AUDIT_LOG_PATH", "./logs/audit.jsonl")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
