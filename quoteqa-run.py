#!/usr/bin/env python3
import argparse
import asyncio
import os
import sys
import traceback

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright
from pydantic import ValidationError

from quoteqa.data import ScenarioStatus
from quoteqa.executor import SuiteExecutor
from quoteqa.utils import build_run_configuration, find_config_file, load_yaml


async def check_playwright_browsers_async():
    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            await browser.close()
        print("✅ Playwright browsers available (Async API startup successful)")
        return True
    except PlaywrightError as e:
        print(f"⚠️ Playwright browsers unavailable (Async API failed): {e}")
        return False
    except Exception as e:
        print(f"❌ Playwright check exception: {e}")
        return False


async def run_scenarios(run_config):
    is_docker = os.getenv("DOCKER_ENV") == "true"
    print(f"🏃 Runtime environment: {'Docker container' if is_docker else 'Local environment'}")

    scenarios = run_config.get_enabled_scenarios()
    if not scenarios:
        print("⚠️  No scenarios enabled, please check configuration file")
        sys.exit(1)
    print(f"📋 Enabled scenarios: {', '.join(s.name for s in scenarios)}")
    print(f"🧾 Rule tracer mode: {run_config.tracer.mode.value}")

    print("🔍 Checking Playwright browsers...")
    if not await check_playwright_browsers_async():
        print("Please manually run: `playwright install` to install browser binaries, then retry.", file=sys.stderr)
        sys.exit(1)

    try:
        results = await SuiteExecutor().run(run_config)
    except Exception:
        print("Scenario execution failed, stack trace:", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)

    failed = [r for r in results if r.status != ScenarioStatus.PASSED]
    print(f"🔢 Total scenarios: {len(results)}")
    print(f"✅ Passed: {len(results) - len(failed)}")
    print(f"❌ Failed: {len(failed)}")
    for result in failed:
        print(f"   - {result.scenario_name}: {result.error_message}")

    if failed:
        sys.exit(1)


def parse_args():
    parser = argparse.ArgumentParser(description="Quote field validation entry point")
    parser.add_argument("--config", "-c", help="YAML configuration file path (optional, default auto-search config/config.yaml)")
    parser.add_argument("--env-file", help="dotenv file with QUOTEQA_* overrides (optional)")
    return parser.parse_args()


def main():
    args = parse_args()

    try:
        config_path = find_config_file(args.config, script_dir=os.path.dirname(os.path.abspath(__file__)))
        cfg = load_yaml(config_path)
        run_config = build_run_configuration(cfg, env_file=args.env_file)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    asyncio.run(run_scenarios(run_config))


if __name__ == "__main__":
    main()
