import asyncio

from weather_service.weather_client import get_weather_data

async def main():
    queries = ["London", "Moscow", "New York", "Moscow", "London"]
    # first batch runs concurrently, so repeats in it still go to the network
    results = await asyncio.gather(*(get_weather_data(q, 3) for q in queries))
    for q, r in zip(queries, results):
        print(f"{q}: {r['current']['condition']['text']}")

    for q in queries:
        r = await get_weather_data(q, 3)
        print(f"{q} (cached): {r['current']['temp_c']}°C")

if __name__ == "__main__":
    asyncio.run(main())
