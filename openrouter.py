import logging

import requests

import config

logger = logging.getLogger("ecosense.openrouter")


def chat_completion(system_prompt, user_prompt):
    """Send a two-message chat to OpenRouter and return the raw completion JSON.

    Non-2xx answers raise ``requests.HTTPError``; callers turn that into a 500.
    """
    headers = {
        "Authorization": f"Bearer {config.OPENROUTER_API_KEY}",
        "Content-Type": "application/json",
    }
    payload = {
        "model": config.OPENROUTER_MODEL,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
    }
    url = f"{config.OPENROUTER_BASE_URL.rstrip('/')}/chat/completions"
    logger.debug("POST %s model=%s", url, config.OPENROUTER_MODEL)
    r = requests.post(url, json=payload, headers=headers, timeout=config.REQUEST_TIMEOUT)
    r.raise_for_status()
    return r.json()
