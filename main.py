from pprint import pprint

from tarot_journal.config import configure_logging
from tarot_journal.logic import perform_reading

if __name__ == "__main__":
    configure_logging()

    # Example: Past / Present / Future, all cards revealed, narrative requested
    result = perform_reading(
        spread_id="three-card",
        question="Should I change my career?",
        seed="demo-seed",
        explain_with_llm=True,  # falls back to a card-meaning narrative without GEMINI_TOKEN
    )

    pprint(result["cards"], sort_dicts=False)
    print()
    print(result["narrative"]["text"])
