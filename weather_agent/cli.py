#!/usr/bin/env python3
import argparse
import asyncio
import sys

from openai import OpenAI

from .adapters import error_body, format_weather_text
from .assistant import WeatherAgent
from .config import load_settings
from .logger import configure_logging
from .pipeline import build_pipeline
from .result import is_err, unwrap, unwrap_err


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Weather Agent CLI")
    parser.add_argument("--city", type=str, help="City or place name (e.g. 'Tokyo')")
    parser.add_argument("--activity", type=str, help="Ask whether the weather suits an activity")
    parser.add_argument("--forecast", action="store_true", help="Today's range and precipitation instead of current weather")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API (Flask dev server)")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)
    pipeline = build_pipeline(settings)

    if args.serve:
        from .app import create_app
        create_app(settings, pipeline).run(host="0.0.0.0", port=settings.port, use_reloader=False)
        return 0

    if args.city:
        if args.forecast:
            result = asyncio.run(pipeline.plan(args.city))
        else:
            result = asyncio.run(pipeline.report(args.city, args.activity))
        if is_err(result):
            error = error_body(unwrap_err(result))
            print(f"Error ({error['kind']}): {error['error']}", file=sys.stderr)
            return 1
        report = unwrap(result)
        print(format_weather_text(report.weather))
        if report.advice:
            print("\n" + report.advice)
        return 0

    if not settings.openai_api_key:
        print("Missing OPENAI_API_KEY. Put it in .env or your environment, or pass --city.", file=sys.stderr)
        return 1

    agent = WeatherAgent(OpenAI(api_key=settings.openai_api_key), pipeline, model=settings.model)
    print("\nAsk about the weather (e.g. 'What's the weather in Tokyo?'); 'exit' to quit.\n")
    while True:
        try:
            q = input("You: ").strip()
        except EOFError:
            break
        if not q:
            continue
        if q.lower() in ("exit", "quit", "q"):
            break
        reply = agent.ask(q)
        print("\nWeather Agent:\n" + reply + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
