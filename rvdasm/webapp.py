"""A small web application that computes greatest common divisors."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server

from rvdasm.gcd import U64_MAX, gcd

INDEX_HTML = """
                <title>GCD Calculator </title>
                <form action="/gcd" method="post">
                <input type="text" name="n"/>
                <input type="text" name="m" />
                <button type="submit">Compute GCD</button>
                </form>
            """

ZERO_MESSAGE = "computing the GDC with zero is boring."

_FORM_TYPE = "application/x-www-form-urlencoded"
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Response:
    """An HTTP response: status, body and content type."""

    status: HTTPStatus
    body: str
    content_type: str = "text/html"

    @property
    def status_line(self) -> str:
        return f"{self.status.value} {self.status.phrase}"


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if value > U64_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def _bad_form(message: str) -> Response:
    return Response(HTTPStatus.BAD_REQUEST, message, "text/plain")


def index_page() -> Response:
    """Return the page holding the input form."""
    return Response(HTTPStatus.OK, INDEX_HTML)


def gcd_page(form: Mapping[str, str]) -> Response:
    """Compute the GCD of the form fields ``n`` and ``m``."""
    try:
        n = _parse_u64(form["n"])
        m = _parse_u64(form["m"])
    except KeyError as exc:
        return _bad_form(f"missing field {exc.args[0]}")
    except ValueError as exc:
        return _bad_form(str(exc))

    if n == 0 or m == 0:
        return Response(HTTPStatus.BAD_REQUEST, ZERO_MESSAGE)

    body = (
        f"The greatest common divisor of the numbers {n} and {m} "
        f"is <b>{gcd(n, m)}</b>\n"
    )
    return Response(HTTPStatus.OK, body)


def _read_form(environ: Mapping) -> dict[str, str] | None:
    content_type = environ.get("CONTENT_TYPE", "")
    if not content_type.split(";")[0].strip().lower() == _FORM_TYPE:
        return None
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    raw = environ["wsgi.input"].read(length) if length > 0 else b""
    fields = parse_qs(raw.decode("utf-8", errors="replace"), keep_blank_values=True)
    return {key: values[0] for key, values in fields.items()}


def _dispatch(environ: Mapping) -> Response:
    path = environ.get("PATH_INFO", "") or "/"
    method = environ.get("REQUEST_METHOD", "GET").upper()
    if path == "/" and method == "GET":
        return index_page()
    if path == "/gcd" and method == "POST":
        form = _read_form(environ)
        if form is None:
            return _bad_form("Content type error")
        return gcd_page(form)
    return Response(HTTPStatus.NOT_FOUND, "", "text/plain")


def application(
    environ: Mapping, start_response: Callable[..., object]
) -> Iterable[bytes]:
    """WSGI entry point serving ``GET /`` and ``POST /gcd``."""
    response = _dispatch(environ)
    body = response.body.encode("utf-8")
    start_response(
        response.status_line,
        [
            ("Content-Type", response.content_type),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the application until interrupted."""
    parser = argparse.ArgumentParser(
        prog="rvdasm-gcd-server", description="Serve the GCD calculator."
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    try:
        server = make_server(args.host, args.port, application)
    except OSError as exc:
        print(f"Error binding server to address: {exc}", file=sys.stderr)
        return 1

    print(f"Serving on http://localhost:{args.port}")
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())