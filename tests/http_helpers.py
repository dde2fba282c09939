import json

import requests


def make_response(status_code=200, body=None, text=None):
    """Build a real requests.Response carrying the given JSON body or raw text."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.encoding = "utf-8"
    if text is None:
        text = json.dumps(body)
    resp._content = text.encode("utf-8")
    return resp
