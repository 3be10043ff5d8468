# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, jsonify

API_STATUS = "API is running"


class MiscController:
    def __init__(self, *, storage_check: Callable[[], bool]) -> None:
        self._storage_check = storage_check

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/status", view_func=self.status, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def status(self):
        return jsonify({"status": API_STATUS})

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._storage_check()
            status["storage"] = "ok"
        except Exception as exc:
            status["ok"] = False
            status["storage"] = f"error: {type(exc).__name__}"
        return jsonify(status), 200 if status["ok"] else 503
