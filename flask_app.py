from http import HTTPStatus
from pathlib import Path

import uvicorn
from asgiref.wsgi import WsgiToAsgi
from flask import Flask, jsonify, make_response, render_template, request, Response

from autocomplete_handler import AutocompleteHandler
from config import Config

TEMPLATE_FOLDER = Path(__file__).resolve().parent / "templates"


class FlaskApp:
    def __init__(self, handler: AutocompleteHandler, config: Config):
        self.handler = handler
        self.host = config.HOST
        self.port = config.PORT
        self.flask_app = Flask(__name__, template_folder=str(TEMPLATE_FOLDER))

        @self.flask_app.get("/")  # type: ignore[misc]
        async def index() -> str:
            """Render the search box, the suggestions for `q` and the card of the selected `country`."""
            query = request.args.get("q", "").strip()
            selected = request.args.get("country", "").strip()
            suggestions = self.handler.suggest(query)
            details = self.handler.select(selected) if selected else None
            return render_template(
                "index.html",
                query=selected or query,
                suggestions=suggestions,
                show_suggestions=bool(query) and not selected,
                selected=selected,
                details=details,
            )

        @self.flask_app.get("/api/suggestions")  # type: ignore[misc]
        async def suggestions() -> Response:
            """Return the suggestions for `q` as JSON."""
            query = request.args.get("q", "")
            return jsonify(query=query, suggestions=self.handler.suggest(query))

        @self.flask_app.get("/api/countries/<path:name>")  # type: ignore[misc]
        async def country(name: str) -> Response:
            """Return the details of a single country as JSON."""
            details = self.handler.select(name)
            if details is None:
                return make_response(jsonify(error="Country not found", name=name), HTTPStatus.NOT_FOUND)
            return jsonify(details.to_dict())

        @self.flask_app.get("/healthcheck")  # type: ignore[misc]
        async def health() -> Response:
            """For the health endpoint, reply with a simple plain text message."""
            response = make_response("The autocomplete is still running fine :)", HTTPStatus.OK)
            response.mimetype = "text/plain"
            return response

    def run(self):
        return uvicorn.Server(
            config=uvicorn.Config(
                app=WsgiToAsgi(self.flask_app),
                port=self.port,
                use_colors=False,
                host=self.host,
            )
        )
