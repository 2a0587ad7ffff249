import logging

import uvicorn
from mealai.api.api_run import app
from mealai.utilities.config import APP_HOST, APP_PORT, DEBUG, get_gemini_api_key
from mealai.utilities.network import get_local_ip


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)
    if not get_gemini_api_key():
        logging.getLogger("mealai_app").warning(
            "GEMINI_API_KEY is not set; /api/generate-meal-plan will answer with a configuration error."
        )
    local_url = f"http://localhost:{APP_PORT}"
    local_ip = get_local_ip()
    lan_url = f"http://{local_ip}:{APP_PORT}"
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Meal planner running on {local_url} (Press CTRL+C to quit)")
    if APP_HOST == "0.0.0.0" and local_ip not in ("127.0.0.1", "localhost"):
        print(f"Accessible from other devices at: {lan_url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
