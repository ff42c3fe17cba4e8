from libs.result import Result, Return
from .dtos import MessageResponse


class LogoutUseCase:
    """
    Session tokens are stateless and cannot be revoked, so logout only
    acknowledges that the client is discarding its token. The bearer token
    itself is checked by the transport before this runs.
    """

    async def execute(self) -> Result[MessageResponse]:
        return Return.ok(MessageResponse(message="Logout successful"))
