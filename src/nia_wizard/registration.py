# Canonical server registration for nia-wizard
from nia_wizard.config import Settings
from nia_wizard.models import SERVER_NAME, Mode, ServerRegistration


def build_local_registration(api_key: str, settings: Settings | None = None) -> ServerRegistration:
    """Registration that launches the server as a local stdio subprocess.

    ABOUTME: env always carries the API key and the API base URL
    """
    settings = settings or Settings()
    return ServerRegistration(
        name=SERVER_NAME,
        transport="stdio",
        command=settings.local_command,
        args=list(settings.local_args),
        env={
            "NIA_API_KEY": api_key,
            "NIA_API_URL": settings.api_url,
        },
    )


def build_remote_registration(api_key: str, settings: Settings | None = None) -> ServerRegistration:
    """Registration that points at the hosted HTTP endpoint.

    ABOUTME: Authenticates with a bearer header built from the API key
    """
    settings = settings or Settings()
    return ServerRegistration(
        name=SERVER_NAME,
        transport="http",
        url=settings.remote_url,
        headers={"Authorization": f"Bearer {api_key}"},
    )


def build_registration(
    api_key: str,
    mode: Mode,
    settings: Settings | None = None,
) -> ServerRegistration:
    """Map (api_key, mode) to the canonical registration.

    ABOUTME: Pure and deterministic; anything other than "remote" is local

    Examples:
        >>> build_registration("nk_x", "remote").headers
        {'Authorization': 'Bearer nk_x'}
        >>> build_registration("nk_x", "local").command
        'pipx'
    """
    if mode == "remote":
        return build_remote_registration(api_key, settings)
    return build_local_registration(api_key, settings)
