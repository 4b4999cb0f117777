"""Credential helpers for CLI commands."""

import logging

from pydantic import SecretStr

from gh_act.config import Config

logger = logging.getLogger(__name__)


def get_auth_token(config: Config) -> str | None:
    """Get the GitHub token from configuration or the token file.

    Args:
        config: Application configuration

    Returns:
        The token, or None when requests should be made unauthenticated

    Note:
        This function only reads credentials. It never prompts for them
        and never writes them anywhere.
    """
    if config.token:
        return config.token.get_secret_value()

    try:
        lines = config.auth_token_file.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.debug(f"No token read from {config.auth_token_file}: {e}")
        return None

    token = lines[0].strip() if lines else ""
    return token or None


def with_auth_token(config: Config) -> Config:
    """Return a copy of ``config`` with the token file already resolved into ``token``."""
    token = get_auth_token(config)
    if token is None:
        return config
    return config.model_copy(update={"token": SecretStr(token)})
