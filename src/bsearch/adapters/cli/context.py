"""State the root group hands to its subcommands through Click's ``obj``."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from bsearch.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from bsearch.composition import AppServices


def load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read configuration for ``profile`` and layer the ``--set`` entries on top.

    Raises:
        click.BadParameter: If ``profile`` is not a valid profile name.
        click.UsageError: If a ``--set`` entry is malformed.
    """
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Configuration and services for one invocation.

    ``set_overrides`` is kept so a subcommand that switches profile can
    reapply the root ``--set`` entries.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def for_profile(self, profile: str | None) -> CLIContext:
        """Return a context for ``profile``, reloading only when it differs."""
        if not profile or profile == self.profile:
            return self
        return replace(self, config=load_config(self.services, profile, self.set_overrides), profile=profile)


#: Decorator passing the :class:`CLIContext` stored by the root group.
pass_cli_context = click.make_pass_decorator(CLIContext)


__all__ = ["CLIContext", "load_config", "pass_cli_context"]
