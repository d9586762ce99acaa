import os
import json
import requests
from dotenv import load_dotenv

# Load .env variables
load_dotenv()

# Target endpoint (local Flask server by default, or the API Gateway URL)
URL = os.getenv("WEBHOOK_URL", "http://127.0.0.1:5000/webhook")

# Payload to send
payload = {
    "event": "ping",
    "source": "send_test_webhook",
    "data": {"attempt": 1, "tags": ["test"]}
}

# Send POST request
resp = requests.post(
    URL,
    headers={"Content-Type": "application/json"},
    data=json.dumps(payload).encode("utf-8"),
    timeout=20
)

print("Status:", resp.status_code)
print("Response:", resp.json())
