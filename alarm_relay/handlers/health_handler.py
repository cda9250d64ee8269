from .base import JSONHandler


class HealthHandler(JSONHandler):
    def get(self):
        self.write({"status": "ok"})
