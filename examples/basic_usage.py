#!/usr/bin/env python3
"""
Basic Usage Example - Interest Calculator

This script demonstrates the basic usage of the interest calculator. It
shows how to:
- Compute simple and compound interest
- Compound at different frequencies
- Round amounts half-up
- Build a full breakdown and handle invalid input

Run: python examples/basic_usage.py
"""

import json

from interest_calc import CompoundingFrequency, InterestCalculator, InvalidArgumentError
from interest_calc.config.loader import ConfigLoader
from interest_calc.logging import configure_logging


def demonstrate_formulas(calculator: InterestCalculator) -> None:
    """Show the basic formulas."""
    print("💰 SIMPLE VS COMPOUND INTEREST")
    print("=" * 50)

    principal, rate, time = 1000.0, 5.0, 2.0
    print(f"Principal={principal}, Rate={rate}%, Time={time} years")
    print(f"   Simple interest:   {calculator.simple_interest(principal, rate, time):.2f}")
    print(f"   Compound interest: {calculator.compound_interest(principal, rate, time):.2f}")
    print(f"   Simple amount:     {calculator.simple_interest_amount(principal, rate, time):.2f}")
    print(f"   Compound amount:   {calculator.compound_interest_amount(principal, rate, time):.2f}")
    print(f"   Difference:        {calculator.interest_difference(principal, rate, time):.2f}")
    print()


def demonstrate_frequencies(calculator: InterestCalculator) -> None:
    """Show the effect of the compounding frequency."""
    print("📅 COMPOUNDING FREQUENCY")
    print("=" * 50)

    for frequency in CompoundingFrequency:
        interest = calculator.compound_interest(1000.0, 5.0, 2.0, frequency)
        print(f"   {frequency.name:<14} {calculator.round_amount(interest, 2):>10}")
    print()


def demonstrate_breakdown(calculator: InterestCalculator) -> None:
    """Show the combined breakdown."""
    print("📊 BREAKDOWN")
    print("=" * 50)

    breakdown = calculator.summarize(25000.0, 4.25, 10, frequency=CompoundingFrequency.MONTHLY)
    print(json.dumps(breakdown.to_dict(), indent=2))
    print()


def demonstrate_errors(calculator: InterestCalculator) -> None:
    """Show invalid input handling."""
    print("🚫 INVALID INPUT")
    print("=" * 50)

    for args in [(-1000.0, 5.0, 2.0), (1000.0, -5.0, 2.0), (1000.0, 5.0, -2.0), (1000.0, 5.0, 2.0, 0)]:
        try:
            calculator.compound_interest(*args)
        except InvalidArgumentError as e:
            print(f"   {args}: {e}")
    print()


def main():
    """Run the demonstrations."""
    config = ConfigLoader.create().load_config()
    configure_logging(params=config.logging)

    calculator = InterestCalculator(config)

    demonstrate_formulas(calculator)
    demonstrate_frequencies(calculator)
    demonstrate_breakdown(calculator)
    demonstrate_errors(calculator)


if __name__ == "__main__":
    main()
