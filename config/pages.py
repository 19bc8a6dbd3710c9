import os
from pathlib import Path

from dotenv import load_dotenv

from utils.errors import EnvironmentMisconfiguration

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

ENV = os.getenv("ENV", "prod")

BASE_URLS = {
    "prod": "https://demowebshop.tricentis.com",
    "local": "http://localhost:5000",
}

VIEWPORT = {
    "width": int(os.getenv("VIEWPORT_WIDTH", "1920")),
    "height": int(os.getenv("VIEWPORT_HEIGHT", "1080")),
}

BROWSER = os.getenv("BROWSER", "chromium")
HEADLESS = os.getenv("HEADLESS", "true").lower() not in ("0", "false", "no")


def get_base_url(env: str = ENV) -> str:
    """BASE_URL 优先，其次按 ENV 取默认地址；都为空时在打开浏览器前直接失败"""
    base_url = os.getenv("BASE_URL") or BASE_URLS.get(env, "")
    if not base_url.strip():
        raise EnvironmentMisconfiguration(f"BASE_URL is not set and no default exists for ENV={env!r}")
    return base_url.rstrip("/")


def build_urls(base_url: str) -> dict:
    return {
        "home": f"{base_url}/",
        "notebooks": f"{base_url}/notebooks",
        "cart": f"{base_url}/cart",
        "checkout": f"{base_url}/onepagecheckout",
        "completed": f"{base_url}/checkout/completed",
    }
