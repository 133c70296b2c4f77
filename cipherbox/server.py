"""HTTP API exposing every cipher through JSON encrypt and decrypt endpoints."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from flask import Flask, Response, jsonify, request

from cipherbox.keyed import Autokey, Polybius, Substitution
from cipherbox.monoalphabetic import ROT13, Affine, Atbash, Caesar
from cipherbox.transposition import Columnar, RailFence

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_ALLOW_METHODS = "GET,POST"
_ALLOW_HEADERS = "Origin,Content-Type,Accept,Authorization"
_EXPOSE_HEADERS = "Content-Length"
_MAX_AGE_SECONDS = 12 * 60 * 60


class _Cipher(Protocol):
    def encrypt(self, plaintext: str) -> str: ...

    def decrypt(self, ciphertext: str) -> str: ...


class _InvalidInput(Exception):
    """The request body does not satisfy the endpoint's required fields."""


@dataclass(frozen=True)
class _CipherRoute:
    name: str
    params: dict[str, type]
    factory: Callable[[dict[str, Any]], _Cipher]


def _shared(cipher: _Cipher) -> Callable[[dict[str, Any]], _Cipher]:
    return lambda _params: cipher


_ROUTES = (
    _CipherRoute("atbash", {}, _shared(Atbash())),
    _CipherRoute("rot13", {}, _shared(ROT13())),
    _CipherRoute("caesar", {"shift": int}, lambda p: Caesar(p["shift"])),
    _CipherRoute(
        "affine",
        {"scale": int, "shift": int},
        lambda p: Affine(p["scale"], p["shift"]),
    ),
    _CipherRoute("railfence", {"rails": int}, lambda p: RailFence(p["rails"])),
    _CipherRoute(
        "polybius",
        {"alphabet": str, "key": str, "chars": str},
        lambda p: Polybius(p["alphabet"], p["key"], p["chars"]),
    ),
    _CipherRoute("substitution", {"key": str}, lambda p: Substitution(p["key"])),
    _CipherRoute("columnar", {"key": str}, lambda p: Columnar(p["key"])),
    _CipherRoute("autokey", {"key": str}, lambda p: Autokey(p["key"])),
)


def _is_present(value: Any, kind: type) -> bool:
    """A required field must have the right type and must not be its zero value."""
    if kind is str:
        return isinstance(value, str) and value != ""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and value != 0
        and _INT_MIN <= value <= _INT_MAX
    )


def _bind(fields: dict[str, type]) -> dict[str, Any]:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise _InvalidInput
    bound = {}
    for name, kind in fields.items():
        value = payload.get(name)
        if not _is_present(value, kind):
            raise _InvalidInput
        bound[name] = value
    return bound


def _make_view(
    route: _CipherRoute, source: str, target: str, operation: str
) -> Callable[[], Response]:
    def view() -> Response:
        bound = _bind({**route.params, source: str})
        cipher = route.factory(bound)
        return jsonify({target: getattr(cipher, operation)(bound[source])})

    return view


def _cross_origin(origin: str | None) -> bool:
    if not origin:
        return False
    host = request.host
    return origin not in (f"http://{host}", f"https://{host}")


def create_app() -> Flask:
    """Build the application with CORS handling and every cipher endpoint."""
    app = Flask(__name__)

    @app.before_request
    def _preflight() -> Response | None:
        if request.method != "OPTIONS" or not _cross_origin(request.headers.get("Origin")):
            return None
        response = app.response_class(status=204)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = _ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = _ALLOW_HEADERS
        response.headers["Access-Control-Max-Age"] = str(_MAX_AGE_SECONDS)
        return response

    @app.after_request
    def _cors_headers(response: Response) -> Response:
        if request.method != "OPTIONS" and _cross_origin(request.headers.get("Origin")):
            response.headers["Access-Control-Allow-Origin"] = "*"
            response.headers["Access-Control-Allow-Credentials"] = "true"
            response.headers["Access-Control-Expose-Headers"] = _EXPOSE_HEADERS
        return response

    @app.errorhandler(_InvalidInput)
    def _invalid_input(_exc: _InvalidInput) -> tuple[Response, int]:
        return jsonify({"error": "invalid input"}), 400

    @app.errorhandler(ValueError)
    def _cipher_failure(exc: ValueError) -> tuple[Response, int]:
        logger.error("cipher failed: %s", exc)
        return jsonify({"error": "internal error"}), 500

    for route in _ROUTES:
        app.add_url_rule(
            f"/{route.name}/encrypt",
            endpoint=f"{route.name}_encrypt",
            view_func=_make_view(route, "plaintext", "ciphertext", "encrypt"),
            methods=["POST"],
        )
        app.add_url_rule(
            f"/{route.name}/decrypt",
            endpoint=f"{route.name}_decrypt",
            view_func=_make_view(route, "ciphertext", "plaintext", "decrypt"),
            methods=["POST"],
        )

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the HTTP server until it stops; returns a process exit status."""
    parser = argparse.ArgumentParser(
        prog="cipherbox", description="Serve the classical cipher API over HTTP."
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="interface to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Server running at port :%d", args.port)
    try:
        create_app().run(host=args.host, port=args.port)
    except OSError as exc:
        logger.error("Failed to run server: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())