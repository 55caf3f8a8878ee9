from weather_service.cache import make_key
from weather_service.weather_client import get_default_client


def main():
    ok = True
    try:
        client = get_default_client()
        client.cache.lookup(make_key("health:test", 1))
        if not client.settings.weatherapi_key:
            ok = False
    except Exception:
        ok = False
    print("OK" if ok else "NOT OK")

if __name__ == "__main__":
    main()
