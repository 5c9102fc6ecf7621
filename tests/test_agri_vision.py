from unittest import mock


WEATHER = {"data": {"temperature": 30, "humidity": 40, "summary": "Sunny"}}


def test_analyze_fetches_weather_then_asks_llm(client, respond, completion, png_data_url):
    with mock.patch("ambee.requests.get", return_value=respond(WEATHER)) as get, \
            mock.patch("openrouter.requests.post", return_value=respond(completion)) as post:
        res = client.post("/api/agri-vision/analyze", json={
            "imageBase64": png_data_url,
            "soilTexture": "Clay Loam",
            "location": {"lat": 10.5, "lng": 76.2},
        })

    assert res.status_code == 200
    assert res.get_json() == completion

    assert get.call_args.args[0].endswith("/weather/latest/by-lat-lng")
    assert get.call_args.kwargs["params"] == {"lat": 10.5, "lng": 76.2}

    system, user = post.call_args.kwargs["json"]["messages"]
    assert "agricultural expert" in system["content"]
    content = user["content"]
    assert content.startswith(f"Based on this soil image ({png_data_url[:100]}... (PNG 4x3)), ")
    assert "soil texture: Clay Loam, " in content
    assert '"summary":"Sunny"' in content
    assert content.endswith("what are your recommendations for crops and farming practices?")


def test_analyze_accepts_non_image_payload(client, respond, completion):
    with mock.patch("ambee.requests.get", return_value=respond(WEATHER)), \
            mock.patch("openrouter.requests.post", return_value=respond(completion)) as post:
        res = client.post("/api/agri-vision/analyze", json={
            "imageBase64": "not really an image",
            "soilTexture": "Sandy",
            "location": {"lat": 1, "lng": 2},
        })

    assert res.status_code == 200
    user = post.call_args.kwargs["json"]["messages"][1]
    assert user["content"].startswith("Based on this soil image (not really an image...), ")


def test_analyze_without_location_is_500(client):
    with mock.patch("ambee.requests.get") as get, mock.patch("openrouter.requests.post") as post:
        res = client.post("/api/agri-vision/analyze", json={"imageBase64": "abc", "soilTexture": "Sandy"})

    assert res.status_code == 500
    assert res.get_json() == {"error": "Failed to analyze soil"}
    get.assert_not_called()
    post.assert_not_called()


def test_analyze_without_image_is_500(client, respond):
    with mock.patch("ambee.requests.get", return_value=respond(WEATHER)), \
            mock.patch("openrouter.requests.post") as post:
        res = client.post("/api/agri-vision/analyze", json={
            "soilTexture": "Sandy",
            "location": {"lat": 1, "lng": 2},
        })

    assert res.status_code == 500
    post.assert_not_called()


def test_analyze_weather_failure_is_500(client, respond):
    with mock.patch("ambee.requests.get", return_value=respond({}, status_code=403)), \
            mock.patch("openrouter.requests.post") as post:
        res = client.post("/api/agri-vision/analyze", json={
            "imageBase64": "abc",
            "soilTexture": "Sandy",
            "location": {"lat": 1, "lng": 2},
        })

    assert res.status_code == 500
    assert res.get_json() == {"error": "Failed to analyze soil"}
    post.assert_not_called()
