"""Supervise a local static file server for the page under test."""

import asyncio
import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager, suppress
from dataclasses import dataclass, field
from typing import Literal

from yarl import URL

from calculator_smoke_test.config import HarnessConfig

log = logging.getLogger(__name__)

READY_MARKER = "Serving HTTP"
CONFLICT_MARKER = "Address already in use"
STOP_GRACE_PERIOD = 5.0


class ServerError(Exception):
    """Base class for static server failures."""


class StartupTimeoutError(ServerError):
    """Raised when the server does not signal readiness in time."""


class PortInUseError(ServerError):
    """Raised when the fallback port is busy as well."""


class ServerStartupError(ServerError):
    """Raised when the server process exits before signalling readiness."""


@dataclass(kw_only=True)
class StaticServer:
    """Handle on a running static file server process.

    The handle exclusively owns the process; ``stop`` releases it.
    """

    host: str
    port: int
    process: asyncio.subprocess.Process | None = field(default=None, repr=False)
    output: list[str] = field(default_factory=list, repr=False)
    _drain_task: asyncio.Task[None] | None = field(default=None, repr=False)

    @property
    def base_url(self) -> URL:
        """Root URL the server answers on."""
        return URL.build(scheme="http", host=self.host, port=self.port, path="/")

    @classmethod
    async def spawn(cls, config: HarnessConfig, port: int) -> "StaticServer":
        """Spawn ``http.server`` for the configured root on the given port."""
        log.info("Starting static server on port %d", port)
        process = await asyncio.create_subprocess_exec(
            sys.executable,
            "-u",
            "-m",
            "http.server",
            str(port),
            "--bind",
            config.host,
            "--directory",
            str(config.root),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
        return cls(host=config.host, port=port, process=process)

    async def wait_for_signal(self) -> Literal["ready", "conflict"]:
        """Read server output until it reports readiness or a port conflict.

        Raises:
            ServerStartupError: If the process exits without either signal

        """
        if self.process is None or self.process.stdout is None:
            raise ServerStartupError("Server process is not running")

        while line := await self.process.stdout.readline():
            text = line.decode(errors="replace").rstrip()
            self.output.append(text)
            log.debug("server: %s", text)
            if READY_MARKER in text:
                return "ready"
            if CONFLICT_MARKER in text:
                return "conflict"

        returncode = await self.process.wait()
        raise ServerStartupError(
            f"Server exited with code {returncode} before becoming ready: "
            + " | ".join(self.output[-5:])
        )

    def start_draining(self) -> None:
        """Keep consuming server output so the pipe never fills."""
        if self.process is not None and self._drain_task is None:
            self._drain_task = asyncio.create_task(self._drain())

    async def _drain(self) -> None:
        if self.process is None or self.process.stdout is None:
            return
        while line := await self.process.stdout.readline():
            log.debug("server: %s", line.decode(errors="replace").rstrip())

    async def stop(self) -> None:
        """Terminate the server process if it is still owned.

        Safe to call repeatedly and when the process already exited.
        """
        process, self.process = self.process, None
        if process is None:
            return

        if process.returncode is None:
            with suppress(ProcessLookupError):
                process.terminate()
            try:
                await asyncio.wait_for(process.wait(), timeout=STOP_GRACE_PERIOD)
            except TimeoutError:
                log.warning("Server on port %d ignored terminate, killing", self.port)
                with suppress(ProcessLookupError):
                    process.kill()
                await process.wait()

        if self._drain_task is not None:
            self._drain_task.cancel()
            with suppress(asyncio.CancelledError):
                await self._drain_task
            self._drain_task = None

        log.info("Server stopped")


async def start_server(config: HarnessConfig) -> StaticServer:
    """Start the static server, falling back once if the port is busy.

    Args:
        config: Harness configuration with ports and timeouts

    Returns:
        A ready server handle; the caller owns it and must stop it

    Raises:
        StartupTimeoutError: If no readiness signal arrives in time
        PortInUseError: If the fallback port is busy as well
        ServerStartupError: If the process dies before signalling

    """
    for port in (config.port, config.fallback_port):
        server = await StaticServer.spawn(config, port)
        try:
            signal = await asyncio.wait_for(
                server.wait_for_signal(), timeout=config.startup_timeout
            )
        except TimeoutError as e:
            await server.stop()
            raise StartupTimeoutError(
                f"Server failed to start within {config.startup_timeout} seconds"
            ) from e
        except BaseException:
            await server.stop()
            raise

        if signal == "ready":
            server.start_draining()
            log.info("Server running at %s", server.base_url)
            try:
                await asyncio.sleep(config.settle_delay)
            except BaseException:
                await server.stop()
                raise
            return server

        await server.stop()
        if port == config.fallback_port:
            break
        log.warning(
            "Port %d already in use, retrying on port %d",
            port,
            config.fallback_port,
        )

    raise PortInUseError(
        f"Ports {config.port} and {config.fallback_port} are both in use"
    )


@asynccontextmanager
async def serve_directory(
    config: HarnessConfig,
) -> AsyncGenerator[StaticServer, None]:
    """Run the static server for the duration of the context."""
    server = await start_server(config)
    try:
        yield server
    finally:
        await server.stop()
