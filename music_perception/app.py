from __future__ import annotations
import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastmcp import FastMCP

from music_perception.core.config import PROFILES, Settings
from music_perception.core.io_utils import utc_now_iso
from music_perception.tools import Dispatcher

logger = logging.getLogger(__name__)


# -----------------------------
# Logging
# -----------------------------
def _setup_logging(level: str = "INFO") -> None:
    # stdout carries the stdio protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


# -----------------------------
# MCP server
# -----------------------------
def build_mcp(dispatcher: Dispatcher) -> FastMCP:
    settings = dispatcher.settings
    mcp = FastMCP(name=settings.service)

    async def _text(tool_name: str, args: Dict[str, Any]) -> str:
        # handlers block on yt-dlp and HTTP, keep them off the event loop
        content = await asyncio.to_thread(dispatcher.call, tool_name, args)
        return content[0]["text"]

    def _register(fn) -> None:
        spec = dispatcher.specs.get(fn.__name__)
        if spec is None:
            return
        mcp.tool(name=spec["name"], description=spec["description"])(fn)

    async def analyze_youtube(url: str) -> str:
        return await _text("analyze_youtube", {"url": url})

    async def download_audio(url: str) -> str:
        return await _text("download_audio", {"url": url})

    async def get_lyrics(track_name: str, artist_name: str) -> str:
        return await _text("get_lyrics", {"track_name": track_name, "artist_name": artist_name})

    async def search_lyrics(query: str) -> str:
        return await _text("search_lyrics", {"query": query})

    async def ping() -> str:
        return await _text("ping", {})

    for fn in (analyze_youtube, download_audio, get_lyrics, search_lyrics, ping):
        _register(fn)

    return mcp


# -----------------------------
# FastAPI (health + CORS) for the HTTP transport
# -----------------------------
def build_app(dispatcher: Dispatcher, mcp: Optional[FastMCP] = None) -> FastAPI:
    settings = dispatcher.settings
    mcp = mcp or build_mcp(dispatcher)
    mcp_app = mcp.http_app(path="/sse")

    app = FastAPI(title=settings.service, version=settings.version, lifespan=mcp_app.lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {
            "ok": True,
            "message": f"{settings.service} alive",
            "service": settings.service,
            "version": settings.version,
            "ts": utc_now_iso(),
            "tools": sorted(dispatcher.specs),
            "mcp_sse": "/sse/",
        }

    @app.get("/health")
    def health():
        return {"ok": True, "ts": utc_now_iso(), "service": settings.service, "version": settings.version}

    # Mount MCP endpoints (gives /sse/)
    app.mount("/", mcp_app)
    return app


def main(argv: list[str] | None = None, default_profile: str | None = None) -> int:
    parser = argparse.ArgumentParser(description="Local YouTube audio / lyrics bridge for MCP clients")
    parser.add_argument("--profile", choices=sorted(PROFILES), default=default_profile,
                        help="Bridge variant (default: MCP_PROFILE env or 'standard')")
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    settings = Settings.from_env(args.profile)
    _setup_logging(settings.log_level)
    dispatcher = Dispatcher(settings)
    mcp = build_mcp(dispatcher)

    logger.info(f"{settings.service} {settings.version} tools={sorted(dispatcher.specs)} hf_space={settings.hf_space_url}")

    if args.transport == "http":
        import uvicorn

        uvicorn.run(build_app(dispatcher, mcp), host=args.host, port=args.port, log_level=settings.log_level.lower())
        return 0

    logger.info("Music Perception Local MCP running...")
    mcp.run()
    return 0


def main_extended(argv: list[str] | None = None) -> int:
    return main(argv, default_profile="extended")


if __name__ == "__main__":
    sys.exit(main())
