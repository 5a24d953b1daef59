# mail_connectors/mailgun/urls.py
#
# Construction des URLs Mailgun. L'authentification basic est embarquée dans
# l'URL : utilisateur fixe "api", mot de passe = clé API.
# Aucune validation ni échappement : les composants sont insérés tels quels.

from typing import Optional

from mail_connectors.core.config import get_mailgun_api_base


def api_url(api_key: str, method: str, api_base: Optional[str] = None) -> str:
    """https://api:<api_key>@<api_base>/<method>"""
    return f"https://api:{api_key}@{api_base or get_mailgun_api_base()}/{method}"


def domain_api_url(api_key: str, domain: str, method: str, api_base: Optional[str] = None) -> str:
    """https://api:<api_key>@<api_base>/<domain>/<method>"""
    return f"https://api:{api_key}@{api_base or get_mailgun_api_base()}/{domain}/{method}"
