import os

ENV = os.getenv("ENV", "prod")

_BASE_URLS = {
    "prod": "https://www.saucedemo.com",
    "local": os.getenv("BASE_URL", "http://localhost:3000"),
}


def build_urls(base_url: str) -> dict:
    base_url = base_url.rstrip("/")
    return {
        "login": f"{base_url}/",
        "inventory": f"{base_url}/inventory.html",
        "cart": f"{base_url}/cart.html",
        "checkout_step_one": f"{base_url}/checkout-step-one.html",
        "checkout_step_two": f"{base_url}/checkout-step-two.html",
        "checkout_complete": f"{base_url}/checkout-complete.html",
    }


URLS = {env: build_urls(base) for env, base in _BASE_URLS.items()}
