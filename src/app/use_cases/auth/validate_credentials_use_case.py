from libs.result import Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_non_empty
from .commands import ValidateCredentialsCommand
from .dtos import ValidateCredentialsResponse


class ValidateCredentialsUseCase:
    """
    Boolean credential check.

    Unlike login this is not an authentication grant: an unknown email is
    simply {valid: false}, no token is minted and nothing is written.
    """

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(
        self, command: ValidateCredentialsCommand
    ) -> Result[ValidateCredentialsResponse]:
        validation = require_non_empty(email=command.email, password=command.password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(command.email)

            if account is None:
                await self.password_hasher.burn(command.password)
                return Return.ok(ValidateCredentialsResponse(valid=False))

            valid = await self.password_hasher.verify(command.password, account.password_hash)
            return Return.ok(ValidateCredentialsResponse(valid=valid))
