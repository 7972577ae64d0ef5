from ..settings import settings

API_URLS = {
    "production": "https://ws.pagseguro.uol.com.br/v2",
    "sandbox": "https://ws.sandbox.pagseguro.uol.com.br/v2",
}

SITE_URLS = {
    "production": "https://pagseguro.uol.com.br/v2",
    "sandbox": "https://sandbox.pagseguro.uol.com.br/v2",
}


def _base(explicit, table) -> str:
    if explicit:
        return explicit.rstrip("/")
    env = (settings.PAGSEGURO_ENV or "production").strip().lower()
    if env not in table:
        raise ValueError(f"Unknown PAGSEGURO_ENV: {settings.PAGSEGURO_ENV!r}")
    return table[env]


def api_url(path: str) -> str:
    return f"{_base(settings.PAGSEGURO_API_URL, API_URLS)}{path}"


def site_url(path: str) -> str:
    return f"{_base(settings.PAGSEGURO_SITE_URL, SITE_URLS)}{path}"
