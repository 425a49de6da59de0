"""HTTP server: page routes, the hello-world server function and static files."""

from __future__ import annotations

import argparse
import json
import logging
import mimetypes
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import Any
from urllib.parse import unquote
from wsgiref.simple_server import make_server

from netron.pages import ProfileEditor, render_home, render_profile

_log = logging.getLogger(__name__)

HELLO_ENDPOINT = "/api/hello_world"
PKG_PATH = "/pkg/netron"

_THEME_SCRIPT = """
(function () {
  var stored = localStorage.getItem('theme') || 'system';
  var dark = window.matchMedia('(prefers-color-scheme: dark)').matches;
  if (stored === 'dark' || (stored === 'system' && dark)) {
    document.documentElement.classList.add('dark');
  }
})();
"""

_THEME_STYLE = """
html { background-color: rgb(245 245 245); }
html.dark { background-color: rgb(23 23 23); }
body { background-color: transparent; }
"""

_CORS_HEADERS = [
    ("Access-Control-Allow-Origin", "*"),
    ("Access-Control-Allow-Methods", "GET,POST"),
    ("Access-Control-Allow-Headers", "content-type"),
]

_REASONS = {
    200: "OK",
    204: "No Content",
    404: "Not Found",
    405: "Method Not Allowed",
}

StartResponse = Callable[[str, list[tuple[str, str]]], Any]


@dataclass(frozen=True)
class ServerConfig:
    site_root: Path = Path("target/site")
    host: str = "0.0.0.0"
    port: int = 8000


def hello_world() -> str:
    return "Hey."


def render_shell(body: str, title: str = "test") -> str:
    """Wrap page content in the full HTML document sent to the browser."""
    hydration = (
        f'<link rel="modulepreload" href="{PKG_PATH}.js">'
        f'<link rel="preload" href="{PKG_PATH}.wasm" as="fetch" '
        'type="application/wasm" crossorigin="">'
        f'<script type="module">import(\'{PKG_PATH}.js\').then(mod => '
        f"mod.default('{PKG_PATH}.wasm').then(() => mod.hydrate()));</script>"
    )
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head>'
        '<meta charset="utf-8"/>'
        '<meta name="viewport" content="width=device-width, initial-scale=1"/>'
        f"<script>{_THEME_SCRIPT}</script>"
        f"<style>{_THEME_STYLE}</style>"
        f"{hydration}"
        f"<title>{escape(title)}</title>"
        f"</head><body>{body}</body></html>"
    )


def resolve_static_file(root: str | Path, path: str) -> Path | None:
    """Map a request path to a file below ``root``, or None if there is none."""
    segments = [s for s in unquote(path).split("/") if s and s != "."]
    if any(s == ".." or "\\" in s or "\0" in s for s in segments):
        return None
    base = Path(root)
    candidate = base.joinpath(*segments)
    if candidate.is_dir():
        candidate = candidate / "index.html"
    if not candidate.is_file():
        return None
    try:
        candidate.resolve().relative_to(base.resolve())
    except ValueError:
        return None
    return candidate


def _status(code: int) -> str:
    return f"{code} {_REASONS[code]}"


def create_app(config: ServerConfig | None = None) -> Callable[..., Iterable[bytes]]:
    """Build the WSGI application."""
    config = config or ServerConfig()
    routes: dict[str, Callable[[], str]] = {
        "/": render_home,
        "/profile": lambda: render_profile(ProfileEditor()),
    }

    def respond(
        start_response: StartResponse,
        code: int,
        body: bytes,
        content_type: str,
        head: bool,
    ) -> list[bytes]:
        headers = [
            ("Content-Type", content_type),
            ("Content-Length", str(len(body))),
            *_CORS_HEADERS,
        ]
        start_response(_status(code), headers)
        return [] if head else [body]

    def app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
        method = str(environ.get("REQUEST_METHOD", "GET")).upper()
        path = environ.get("PATH_INFO") or "/"
        _log.info(
            "http_request method=%s path=%s remote_addr=%s",
            method,
            path,
            environ.get("REMOTE_ADDR"),
        )
        head = method == "HEAD"
        html = "text/html; charset=utf-8"

        if method == "OPTIONS":
            start_response(_status(204), list(_CORS_HEADERS))
            return []

        if path == HELLO_ENDPOINT:
            if method not in ("GET", "POST"):
                return respond(start_response, 405, b"", "text/plain", head)
            body = json.dumps(hello_world()).encode()
            return respond(start_response, 200, body, "application/json", head)

        page = routes.get(path)
        if page is not None:
            if method not in ("GET", "HEAD"):
                return respond(start_response, 405, b"", "text/plain", head)
            return respond(
                start_response, 200, render_shell(page()).encode(), html, head
            )

        if method in ("GET", "HEAD"):
            found = resolve_static_file(config.site_root, path)
            if found is not None:
                content_type = mimetypes.guess_type(found.name)[0]
                return respond(
                    start_response,
                    200,
                    found.read_bytes(),
                    content_type or "application/octet-stream",
                    head,
                )

        body = render_shell("<h1>404 Not Found</h1>").encode()
        return respond(start_response, 404, body, html, head)

    return app


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="netron", description="Run the web server.")
    parser.add_argument("--host", default=ServerConfig.host)
    parser.add_argument("--port", type=int, default=ServerConfig.port)
    parser.add_argument("--site-root", type=Path, default=ServerConfig.site_root)
    parser.add_argument("--log-level", default="DEBUG")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    config = ServerConfig(site_root=args.site_root, host=args.host, port=args.port)
    with make_server(config.host, config.port, create_app(config)) as httpd:
        _log.info("listening on http://%s:%d", config.host, config.port)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            pass