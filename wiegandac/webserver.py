"""Small HTTP front end with fixed pages."""

from __future__ import annotations

import logging
import os
import random
import threading
from collections.abc import Callable
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from wiegandac.logger import Logger

_access_log = logging.getLogger(__name__)

INDEX_PAGE = """
<!DOCTYPE html><head>
<title>wiesp32A - Wiegang Access Control</title>
<link rel="stylesheet" href="style.css">
</head>
<body>
<content>
<h1>Wiegand Access Control</h1>
<sidebar>%TMPL_SIDEBAR%</sidebar>
<main>%TMPL_MAIN%</main>
</content>
</body>
</html>
"""

STYLE_SHEET = """

"""

SIDEBAR_PAGE = """
<!DOCTYPE html>
<body><ul>
<li><a href="/">Home</a></li>
<li><a href="/content">Content</a></li>
<li><a href="/heap">Heap</a></li>
</ul></body>
"""

CONTENT_PAGE = """
<!DOCTYPE html>
<body>
<p>This is the content</p>
<p>Free heap: <span id="heap"></span></p>
<p>1 Bla bla bla</p>
<p>2 Bla bla bla</p>
<p>3 Bla bla bla</p>
<p>4 Bla bla bla</p>
<p>5 Bla bla bla</p>
</body>
"""

CONTENT_PAGE_SHORT = """
<!DOCTYPE html>
<body><h1>Content</h1></body>
"""


@dataclass(frozen=True)
class Response:
    """An HTTP response: status, content type and text body."""

    status: int
    content_type: str = "text/plain"
    body: str = ""


@dataclass(frozen=True)
class _Route:
    path: str
    methods: frozenset[str] | None
    make_response: Callable[[], Response]


def process_template(var: str, rng: random.Random | None = None) -> str:
    """Return the replacement text for the page template variable ``var``."""
    rng = rng if rng is not None else random.Random()
    if var == "TMPL_SIDEBAR":
        return str(rng.randrange(10, 20))
    if var == "TMPL_MAIN":
        return str(rng.randrange(0, 50))
    return ""


def _free_memory() -> int:
    try:
        return os.sysconf("SC_AVPHYS_PAGES") * os.sysconf("SC_PAGE_SIZE")
    except (ValueError, OSError, AttributeError):
        return 0


class Webserver:
    """Serves the access-control pages; routes are matched in registration order."""

    def __init__(
        self, host: str = "0.0.0.0", port: int = 80, logger: Logger | None = None
    ) -> None:
        self.host = host
        self._port = port
        self.logger = logger if logger is not None else Logger()
        self._server: ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None
        self._routes = self._build_routes()

    def _build_routes(self) -> list[_Route]:
        def page(body: str) -> Callable[[], Response]:
            return lambda: Response(200, "text/html", body)

        return [
            _Route("/", None, page(INDEX_PAGE)),
            _Route("/style.css", None, page(STYLE_SHEET)),
            _Route("/sidebar", None, page(SIDEBAR_PAGE)),
            _Route("/content", None, page(CONTENT_PAGE)),
            _Route("/content", None, page(CONTENT_PAGE_SHORT)),
            _Route("/heap", frozenset({"GET"}), self._heap),
        ]

    def _heap(self) -> Response:
        self.logger.println("[HTTP] GET /heap")
        return Response(200, "text/plain", str(_free_memory()))

    def handle(self, method: str, path: str) -> Response:
        """Answer a request for ``path`` made with ``method``."""
        method = method.upper()
        url = urlsplit(path).path or "/"
        for route in self._routes:
            if route.path == url and (route.methods is None or method in route.methods):
                return route.make_response()
        self.logger.print("[HTTP] ")
        self.logger.print(method)
        self.logger.print(" ")
        self.logger.print(url)
        self.logger.println(" => 404 (NOT FOUND)")
        return Response(404)

    @property
    def port(self) -> int:
        """The port listened on; the bound one once running."""
        if self._server is not None:
            return self._server.server_address[1]
        return self._port

    def run(self) -> None:
        """Start serving in a background thread; does nothing if already running."""
        if self._server is not None:
            return
        self._server = ThreadingHTTPServer((self.host, self._port), _make_handler(self))
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        self.logger.println("Starting Webserver")

    def stop(self) -> None:
        """Stop serving and release the socket."""
        if self._server is None:
            return
        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join()
        self._server = None
        self._thread = None

    def __enter__(self) -> Webserver:
        self.run()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


def _make_handler(webserver: Webserver) -> type[BaseHTTPRequestHandler]:
    class _Handler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            response = webserver.handle(self.command, self.path)
            payload = response.body.encode("utf-8")
            self.send_response(response.status)
            self.send_header("Content-Type", response.content_type)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(payload)

        do_GET = do_POST = do_PUT = do_DELETE = _dispatch
        do_PATCH = do_HEAD = do_OPTIONS = _dispatch

        def log_message(self, format: str, *args: object) -> None:
            """Send access lines to the module logger instead of stderr."""
            _access_log.debug(
                "%s - %s", self.address_string(), format % args
            )

    return _Handler