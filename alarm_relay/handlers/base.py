import json
from http import HTTPStatus

import tornado.web
from pydantic import BaseModel

from alarm_relay.models import ErrorResponse


class JSONHandler(tornado.web.RequestHandler):
    """Request handler that renders pydantic models and errors as JSON."""

    def set_default_headers(self):
        self.set_header("Content-Type", "application/json")

    def write_model(self, model: BaseModel):
        self.write(model.model_dump_json(by_alias=True))

    def write_error(self, status_code: int, **kwargs):
        message = self._reason or HTTPStatus(status_code).phrase
        exc_info = kwargs.get("exc_info")
        if exc_info and isinstance(exc_info[1], tornado.web.HTTPError):
            error = exc_info[1]
            if error.log_message:
                message = error.log_message % error.args if error.args else error.log_message
        self.finish(json.dumps(ErrorResponse(message=message).model_dump()))


class NotFoundHandler(JSONHandler):
    def prepare(self):
        raise tornado.web.HTTPError(404, "no route for %s", self.request.path)
