"""Response header policy applied to everything the gateway serves.

The content-security-policy allow-lists the third-party hosts the bundled
frontend needs: Google Fonts, postimg/YouTube thumbnails, the privacy-enhanced
YouTube embed, and the two upstream APIs the browser may talk to directly.
"""

from __future__ import annotations

CSP_DIRECTIVES: dict[str, list[str]] = {
    "default-src": ["'self'"],
    "script-src": [
        "'self'",
        "'unsafe-inline'",
        "https://www.gstatic.com",
        "https://cdn.jsdelivr.net",
    ],
    "style-src": ["'self'", "'unsafe-inline'", "https://fonts.googleapis.com"],
    "font-src": ["'self'", "https://fonts.gstatic.com"],
    "img-src": ["'self'", "data:", "https://i.postimg.cc", "https://i.ytimg.com"],
    "frame-src": ["'self'", "https://www.youtube-nocookie.com"],
    "connect-src": ["'self'", "https://openrouter.ai", "https://api.aladhan.com"],
    "base-uri": ["'self'"],
    "form-action": ["'self'"],
    "frame-ancestors": ["'self'"],
    "object-src": ["'none'"],
    "script-src-attr": ["'none'"],
    "upgrade-insecure-requests": [],
}


def build_csp(directives: dict[str, list[str]]) -> str:
    """Serialise directives as ``name src src; name src; flag``."""
    parts = []
    for name, sources in directives.items():
        parts.append(" ".join([name, *sources]))
    return "; ".join(parts)


SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": build_csp(CSP_DIRECTIVES),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}
