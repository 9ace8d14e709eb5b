"""Hello echo and health reporting."""

from ..core.store import utc_now_iso
from ..schemas.hello import HealthStatus, HelloInput, HelloNumbers, HelloOutput


GREETING = "Hello World! x="

# Input used by ``GET /``, which carries no body.
STUB_INPUT = HelloInput(x="stub-x", y=[])


class HelloService:
    def greet(self, data: HelloInput) -> HelloOutput:
        return HelloOutput(a=GREETING + data.x, b=HelloNumbers(c=list(data.y)))

    def health(self) -> HealthStatus:
        return HealthStatus(status="OK", timestamp=utc_now_iso())
