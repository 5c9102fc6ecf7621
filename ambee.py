"""Thin client for the Ambee environmental data API."""

import logging

import requests

import config

logger = logging.getLogger("ecosense.ambee")


def _headers():
    return {
        "x-api-key": config.AMBEE_API_KEY,
        "Content-type": "application/json",
    }


def _get_by_lat_lng(path, lat, lng):
    url = f"{config.AMBEE_BASE_URL.rstrip('/')}/{path}"
    logger.debug("GET %s lat=%s lng=%s", url, lat, lng)
    r = requests.get(
        url,
        params={"lat": lat, "lng": lng},
        headers=_headers(),
        timeout=config.REQUEST_TIMEOUT,
    )
    r.raise_for_status()
    return r.json()


def air_quality(lat, lng):
    return _get_by_lat_lng("latest/by-lat-lng", lat, lng)


def pollen(lat, lng):
    return _get_by_lat_lng("latest/pollen/by-lat-lng", lat, lng)


def weather(lat, lng):
    return _get_by_lat_lng("weather/latest/by-lat-lng", lat, lng)
