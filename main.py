# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Serves the Veo gallery: a Mesop app mounted in FastAPI."""

import logging
import os

import mesop as me
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware

from common.analytics import get_logger
from config.default import Default
from pages.gallery import gallery_page  # noqa: F401  registers the page

config = Default()
logger = get_logger(__name__)

app = FastAPI(title=config.APP_TITLE)

if not config.API_KEY:
    logger.warning("API_KEY is not set; video generation requests will fail.")


@app.get("/healthz")
def healthz():
    return {"status": "ok", "model": config.VEO_MODEL_ID}


app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=os.environ.get("DEBUG_MODE", "") == "true")
    ),
)

if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8080")),
    )
