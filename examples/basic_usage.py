#!/usr/bin/env python3
"""
Basic Usage Example - Eenheden Portfolio Engine

This script demonstrates the basic usage of the portfolio engine. It shows how to:
- Initialize the engine and apply the logging settings from config/settings.yaml
- Register clients and their contracts
- Read portfolio statistics, tier progress and revenue breakdown
- Compare against a unit goal and report growth

Run: python examples/basic_usage.py
"""

from eenheden_app.engine import PortfolioEngine


def print_section(title: str) -> None:
    print(f"\n=== {title} ===")


def main() -> None:
    engine = PortfolioEngine()
    engine.configure_logging()

    acme = engine.add_client("Acme Corporation", "Enterprise software solutions.")
    engine.add_contract(acme.id, "PS", 100, "2024-01-15")
    engine.add_contract(acme.id, "DELA", start_date="2024-02-01")
    engine.toggle_pin(acme.id)

    globex = engine.add_client("Global Innovations Ltd", "Strategic business consulting.")
    engine.add_contract(globex.id, "BL", 150, "2024-03-10")

    techstart = engine.add_client("TechStart Solutions", "Digital transformation and cloud.")
    engine.add_contract(techstart.id, "LS", 200, "2024-04-05")
    engine.add_contract(techstart.id, "PS", 75, "2024-04-20")

    print_section("Portfolio")
    stats = engine.stats()
    print(f"Clients:   {stats.total_clients}")
    print(f"Contracts: {stats.total_contracts}")
    print(f"Units:     {stats.total_units}")
    print(f"Revenue:   {stats.total_revenue}")
    print(f"Tier:      {stats.current_tier.value}")

    print_section("Tier progress")
    progress = engine.tier_progress()
    breakdown = progress["revenue"].breakdown
    print(f"FT1 {breakdown.ft1} | FT2 {breakdown.ft2} | FT3 {breakdown.ft3}")
    if progress["next_tier"]:
        info = progress["next_tier"]
        print(f"{info.units_needed} more units needed for {info.next_tier.value}")
    print(f"Progress: {progress['progress_pct']:.1f}%")

    print_section("Goal: 1500 units")
    goal = engine.compare_goal(1500)
    print(f"Target tier:       {goal.target_tier.value}")
    print(f"Extra units:       {goal.units_difference}")
    print(f"Extra revenue:     {goal.revenue_difference}")

    print_section("Growth over 1 month")
    report = engine.growth("1month")
    for name in ("units", "revenue", "clients", "contracts"):
        metric = getattr(report, name)
        pct = "n/a" if metric.growth_pct is None else f"{metric.growth_pct}%"
        print(f"{name:<10} {metric.baseline} -> {metric.current} ({pct})")

    print_section("Clients (pinned first)")
    for client in engine.list_clients(mode="pinned"):
        marker = "*" if client.pinned else " "
        print(f"{marker} {client.name}: {engine.client_units(client.id)} units")


if __name__ == "__main__":
    main()
