import asyncio
import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from dotenv import load_dotenv
load_dotenv()

from quoteqa.data import RunConfiguration
from quoteqa.executor import SuiteExecutor

OMEGA_NY_AGENT = {
    "jurisdiction": "NY",
    "rating_program_code": "OMG1",
    "current_user_distribution_channel": "AGENT",
    "is_omega1": True,
    "is_logging_on": True,
    "enable_dom_validation_quote_summary_page": True,
    "enable_dom_validation_policy_info_page": True,
}


async def example():
    run_config = RunConfiguration(
        target_url=os.getenv("QUOTEQA_TARGET_URL", "https://quotes.example.com/quote/new"),
        browser_config={"headless": False, "viewport": {"width": 1366, "height": 768}},
        tracer={"mode": os.getenv("QUOTEQA_TRACER_MODE", "deferred")},
        scenarios=[
            {
                "name": "transfer unlocks new business credit",
                "initial_state": OMEGA_NY_AGENT,
                "steps": [
                    {"action": "select", "field": "transaction_type", "description": "Transfer"},
                    {"action": "select", "field": "new_business_credit", "code": "Y"},
                    {"action": "select", "field": "source_of_business", "description": "Referral"},
                ],
            },
            {
                "name": "rewrite reason cleared when leaving rewrite",
                "initial_state": OMEGA_NY_AGENT,
                "steps": [
                    {"action": "select", "field": "transaction_type", "description": "Rewrite"},
                    {"action": "select", "field": "rewrite_reason", "description": "Insured Requested"},
                    {"action": "select", "field": "transaction_type", "description": "New Business"},
                    {"action": "load", "page": "PolicyInfo"},
                ],
            },
        ],
    )

    results = await SuiteExecutor().run(run_config)
    for result in results:
        print(f"{result.scenario_name}: {result.status} ({result.rules_flushed} rules traced)")
        if result.error_message:
            print(f"   {result.error_message}")


async def main():
    """Main function - Run all examples"""

    try:
        await example()

    except Exception as e:
        print(f"Example failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
