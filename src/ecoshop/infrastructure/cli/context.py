"""Per-invocation state shared by all CLI commands."""

from __future__ import annotations

import json
from dataclasses import dataclass

import click

from ecoshop.application.responses import ApiResponse, error_response
from ecoshop.domain.exceptions import DomainException
from ecoshop.domain.model.principal import Principal
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory
from ecoshop.infrastructure.bootstrap import unit_of_work_factory
from ecoshop.infrastructure.config import Settings


@dataclass
class CliContext:
    settings: Settings
    user_id: int | None = None
    is_admin: bool = False

    @property
    def principal(self) -> Principal:
        # identity comes from the external auth service; here it is passed in
        if self.user_id is None:
            raise click.UsageError("--user-id (or ECOSHOP_USER_ID) is required for this command.")
        return Principal(user_id=self.user_id, is_admin=self.is_admin)

    def uow_factory(self) -> UnitOfWorkFactory:
        return unit_of_work_factory(self.settings)


pass_cli_context = click.make_pass_decorator(CliContext)

json_option = click.option("--json", "as_json", is_flag=True, default=False,
                           help="Print the response body as JSON.")


def echo_json(response: ApiResponse) -> None:
    click.echo(json.dumps({"status": int(response.status), **response.body}, indent=2))


def fail(exc: DomainException, as_json: bool) -> None:
    """Report a domain error and exit non-zero."""
    if as_json:
        echo_json(error_response(exc))
        raise click.exceptions.Exit(1)
    raise click.ClickException(str(exc))
