"""
Response values. Built fresh per request, never mutated afterwards.
"""
import socket
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

GREETING_MESSAGE = "Hello from GitOps!"
RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"


class BuildInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    git_sha: str
    build_time: str

    @classmethod
    def from_settings(cls, settings) -> "BuildInfo":
        return cls(version=settings.APP_VERSION, git_sha=settings.GIT_SHA, build_time=settings.BUILD_TIME)


class GreetingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    version: str
    git_sha: str
    build_time: str
    time_utc: str
    hostname: str

    @classmethod
    def build(cls, build: BuildInfo, now: datetime | None = None) -> "GreetingResponse":
        now = now or datetime.now(timezone.utc)
        return cls(
            message=GREETING_MESSAGE,
            version=build.version,
            git_sha=build.git_sha,
            build_time=build.build_time,
            time_utc=now.astimezone(timezone.utc).strftime(RFC3339_UTC),
            hostname=resolve_hostname(),
        )


def resolve_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""
