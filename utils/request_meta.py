"""Request metadata helpers"""
from fastapi import Request

# Matches WaitlistSignup.ip_address
MAX_IP_LENGTH = 64


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    # Check X-Forwarded-For header (when behind proxy/load balancer)
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first[:MAX_IP_LENGTH]
    # Check X-Real-IP header
    real_ip = (request.headers.get("X-Real-IP") or "").strip()
    if real_ip:
        return real_ip[:MAX_IP_LENGTH]
    # Fall back to direct client IP
    return request.client.host[:MAX_IP_LENGTH] if request.client and request.client.host else "unknown"
