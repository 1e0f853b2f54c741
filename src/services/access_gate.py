"""Registration gate and the per-request pipeline it runs in."""
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple

from src.services.attendee_service import AttendeeDirectory

logger = logging.getLogger(__name__)

REGISTRATION_ROUTE = "register"

# Route id -> exempt from the registration gate. Built once at import.
ROUTE_EXEMPTIONS: Dict[str, bool] = {
    "dashboard": False,
    "agenda": False,
    "detail": False,
    "register": True,
    "sign_in": True,
    "sign_out": True,
}


@dataclass(frozen=True)
class Request:
    """What a pipeline stage sees of one page render."""

    route: str
    identity: Optional[str] = None
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Redirect:
    """Stop the request and send the user to another route."""

    route: str
    stage: str


# A stage returns None to let the request continue
Stage = Callable[[Request], Awaitable[Optional[Redirect]]]


class AccessGate:
    """
    Sends signed-in users without an attendee profile to registration.

    Decision per request:
        - no identity: allow
        - exempt route: allow, without touching the directory
        - attendee found: allow
        - otherwise: redirect to the registration route
    """

    name = "access_gate"

    def __init__(
        self,
        directory: AttendeeDirectory,
        exemptions: Mapping[str, bool] = ROUTE_EXEMPTIONS,
        registration_route: str = REGISTRATION_ROUTE,
    ):
        if not exemptions.get(registration_route, False):
            raise ValueError(f"Registration route '{registration_route}' must be exempt")
        self._directory = directory
        self._exemptions = dict(exemptions)
        self.registration_route = registration_route

    def is_exempt(self, route: str) -> bool:
        """Unknown routes are gated."""
        return self._exemptions.get(route, False)

    async def __call__(self, request: Request) -> Optional[Redirect]:
        if request.identity is None:
            return None

        if self.is_exempt(request.route):
            return None

        if await self._directory.lookup(request.identity) is not None:
            return None

        logger.debug(f"{request.identity} has no attendee profile, redirecting from {request.route}")
        return Redirect(route=self.registration_route, stage=self.name)


class RequestPipeline:
    """Ordered, named stages run before each page handler."""

    def __init__(self, stages: List[Tuple[str, Stage]]):
        names = [name for name, _ in stages]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate stage names: {names}")
        self._stages = list(stages)

    async def run(self, request: Request) -> Optional[Redirect]:
        """
        Run stages in order; the first redirect short-circuits the rest.

        Returns:
            Redirect, or None when every stage allowed the request
        """
        for name, stage in self._stages:
            outcome = await stage(request)
            if outcome is not None:
                logger.debug(f"Stage {name} redirected {request.route} -> {outcome.route}")
                return outcome
        return None
