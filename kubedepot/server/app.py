"""FastAPI application serving kubeconfigs from a config store."""

import json
import logging
from pathlib import Path
from typing import Callable

import yaml
from fastapi import FastAPI, Query, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from kubedepot.exceptions import ConfigNotFoundError, KubedepotException
from kubedepot.kubeconfig import KubeConfig
from kubedepot.resolver import resolve
from kubedepot.store import Store

from .index import load_template, render_index

_LOGGER = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
YAML_MEDIA_TYPE = "application/yaml"


def _store(request: Request) -> Store:
    return request.app.state.store  # type: ignore[no-any-return]


def _encode_names_json(names: list[str]) -> str:
    return json.dumps(names)


def _encode_names_yaml(names: list[str]) -> str:
    return yaml.dump(names, sort_keys=False)


def _list_handler(
    encode: Callable[[list[str]], str], media_type: str
) -> Callable[[Request], Response]:
    def handle_list(request: Request) -> Response:
        """List the names of all available kubeconfigs."""
        _LOGGER.info("Listing configs")
        names = _store(request).list_names()
        _LOGGER.debug("Listed configs %s", names)
        return Response(encode(names), media_type=media_type)

    return handle_list


def _get_handler(
    encode: Callable[[KubeConfig], str], media_type: str
) -> Callable[..., Response]:
    def handle_get(
        request: Request, name: list[str] | None = Query(default=None)
    ) -> Response:
        """Return the requested kubeconfigs merged into one, or all of them."""
        if name:
            _LOGGER.info("Getting configs %s", name)
        else:
            _LOGGER.info("No config names provided, getting all configs")
        kubeconfig = resolve(_store(request), name or [])
        return Response(encode(kubeconfig), media_type=media_type)

    return handle_get


def register_exception_handlers(app: FastAPI) -> None:
    """Map library errors to HTTP responses."""

    @app.exception_handler(ConfigNotFoundError)
    async def not_found_handler(
        request: Request, exc: ConfigNotFoundError
    ) -> PlainTextResponse:
        _LOGGER.error("Config not found for %s: %s", request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(KubedepotException)
    async def kubedepot_exception_handler(
        request: Request, exc: KubedepotException
    ) -> PlainTextResponse:
        _LOGGER.error("Failed to load and merge configs: %s", exc)
        return PlainTextResponse(
            f"Failed to load and merge configs: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app(store: Store, web_dir: Path | None = None) -> FastAPI:
    """Create the application serving the configs of a loaded store."""
    template = load_template(web_dir)
    # Fail at startup rather than on the first request
    render_index(template, store.list_names())

    app = FastAPI(
        title="kubedepot",
        description="Serve and merge kubeconfig files",
        docs_url=None,
        redoc_url=None,
    )
    app.state.store = store
    register_exception_handlers(app)

    def index(request: Request) -> HTMLResponse:
        """Render the config selection page."""
        return HTMLResponse(render_index(template, _store(request).list_names()))

    app.add_api_route(
        "/json/list",
        _list_handler(_encode_names_json, JSON_MEDIA_TYPE),
        methods=["GET"],
    )
    app.add_api_route(
        "/yaml/list",
        _list_handler(_encode_names_yaml, YAML_MEDIA_TYPE),
        methods=["GET"],
    )
    app.add_api_route(
        "/json/get",
        _get_handler(KubeConfig.to_json, JSON_MEDIA_TYPE),
        methods=["GET"],
    )
    app.add_api_route(
        "/yaml/get",
        _get_handler(KubeConfig.to_yaml, YAML_MEDIA_TYPE),
        methods=["GET"],
    )
    app.add_api_route("/", index, methods=["GET"], response_class=HTMLResponse)
    return app
