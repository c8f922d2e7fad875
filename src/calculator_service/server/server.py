"""HTTP server exposing the arithmetic operations."""
from typing import Optional

from flask import Flask, Response, request
from pydantic import BaseModel, ConfigDict, Field
from werkzeug.exceptions import HTTPException

from calculator_service.common.config import ServiceConfig
from calculator_service.common.errors import UnexpectedError
from calculator_service.common.logger import logger
from calculator_service.common.models import ErrorResponse
from calculator_service.common.operations import Operation
from calculator_service.server.dispatcher import Dispatcher, Response as DispatchResponse


WELCOME_MESSAGE = (
    "Welcome to the Calculator Microservice. Use "
    + ", ".join(f"/{op.value}" for op in Operation)
    + " with ?num1=number&num2=number"
)


def _json_response(body: DispatchResponse) -> Response:
    """Serialize a response model, using its statuscode as the HTTP status."""
    return Response(body.model_dump_json(), status=body.statuscode, mimetype="application/json")


def create_app(dispatcher: Optional[Dispatcher] = None) -> Flask:
    """
    Build the Flask application.

    Routes:
        - ``GET /``: plain-text usage banner
        - ``GET /<operation>?num1=...&num2=...``: run an operation

    :param Dispatcher dispatcher: Dispatcher handling operation requests

    :return: Configured Flask application
    :rtype: Flask
    """
    dispatcher = dispatcher or Dispatcher()
    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def index() -> Response:
        return Response(WELCOME_MESSAGE, status=200, mimetype="text/plain")

    @app.route("/<operation>", methods=["GET"])
    def run_operation(operation: str) -> Response:
        return _json_response(dispatcher.dispatch(operation, request.args))

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException) -> Response:
        # Routing errors (unknown paths, wrong method) keep the JSON shape
        dispatcher.logger.error(f"HTTP error {exc.code} on {request.path}: {exc.description}")
        return _json_response(ErrorResponse(statuscode=exc.code, msg=exc.description))

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception) -> Response:
        dispatcher.logger.exception(f"Error occurred: {exc}")
        return _json_response(
            ErrorResponse(statuscode=UnexpectedError.status_code, msg=UnexpectedError.default_message)
        )

    return app


class CalculatorServer(BaseModel):
    """
    HTTP server answering arithmetic requests.

    Features:
        - One thread per request, no state shared between requests.
        - Every request outcome is logged.
    """

    # Allow arbitrary types like Flask
    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: ServiceConfig = Field(default_factory=ServiceConfig, description="Host, port and logging settings")
    dispatcher: Dispatcher = Field(default_factory=Dispatcher, description="Request dispatcher")

    def build_app(self) -> Flask:
        """
        Create the Flask application served by this server.

        :return: Flask application
        :rtype: Flask
        """
        return create_app(self.dispatcher)

    def start(self) -> None:
        """
        Serve requests until the process is interrupted.

        :return: None
        """
        app = self.build_app()
        logger.info(f"🖥️ Server running on port {self.config.port}")
        app.run(host=str(self.config.host), port=self.config.port, threaded=True)
