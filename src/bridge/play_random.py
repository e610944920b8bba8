"""
Tiny CLI to deal, bid and play random boards and summarise the results.

Usage (from project root, after installing in editable mode):
    python -m bridge.play_random --deals 20 --seed 7 --links
"""
from __future__ import annotations

import argparse
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from .agents import RandomAgent
from .deal import Deal, Vulnerability
from .game import play_one_deal
from .render import auction_to_text, deal_to_link
from .seats import Position, lefty


@dataclass
class TrialConfig:
    """Settings for a batch of random boards."""

    deals: int = 10
    seed: int = 42
    pass_bias: float = 0.7
    first_dealer: Position = Position.SOUTH
    rotate_dealer: bool = True
    vulnerability: Vulnerability = Vulnerability.NEITHER
    show_auctions: bool = False
    show_links: bool = False


@dataclass
class TrialSummary:
    deals: int = 0
    passed_out: int = 0
    contracts_by_strain: Dict[str, int] = field(default_factory=dict)
    declarer_tricks: List[int] = field(default_factory=list)
    bad_boards: int = 0

    def average_declarer_tricks(self) -> float:
        if not self.declarer_tricks:
            return 0.0
        return sum(self.declarer_tricks) / len(self.declarer_tricks)


def _check_deal(deal: Deal) -> bool:
    """Every finished board has 40 HCP and, if played, no card left in hand."""
    if sum(deal.point_counts()) != 40:
        return False
    if deal.tricks and any(h.unplayed() for h in deal.hands):
        return False
    return True


def run_trials(cfg: TrialConfig) -> TrialSummary:
    rng = random.Random(cfg.seed)
    agent = RandomAgent(seed=cfg.seed, pass_bias=cfg.pass_bias)
    summary = TrialSummary()
    strains: Counter[str] = Counter()
    dealer = cfg.first_dealer

    for i in range(cfg.deals):
        deal = play_one_deal(
            agent.choose_call,
            agent.choose_card,
            dealer=dealer,
            rng=rng,
            vulnerability=cfg.vulnerability,
        )
        summary.deals += 1
        if not _check_deal(deal):
            summary.bad_boards += 1
        if deal.auction.is_passed_out():
            summary.passed_out += 1
        else:
            contract = deal.auction.final_contract
            strain = contract.bid_strain() if contract is not None else None
            if strain is not None:
                strains[strain.to_text()] += 1
            tricks = deal.declarer_tricks()
            if tricks is not None:
                summary.declarer_tricks.append(tricks)

        if cfg.show_auctions:
            print(f"Board {i + 1} (dealer {dealer})")
            print(auction_to_text(deal.auction), flush=True)
        if cfg.show_links:
            print(deal_to_link(deal), flush=True)

        if cfg.rotate_dealer:
            dealer = lefty(dealer)

    summary.contracts_by_strain = dict(strains)
    return summary


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Deal, bid and play random bridge boards.")
    parser.add_argument(
        "--deals",
        type=int,
        default=10,
        help="Number of boards to play.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility.",
    )
    parser.add_argument(
        "--pass-bias",
        type=float,
        default=0.7,
        help="Probability that a random bidder passes when passing is legal.",
    )
    parser.add_argument(
        "--dealer",
        choices=[p.name.lower() for p in Position],
        default="south",
        help="Dealer of the first board.",
    )
    parser.add_argument(
        "--vulnerability",
        choices=[v.value for v in Vulnerability],
        default=Vulnerability.NEITHER.value,
        help="Vulnerability used for every board.",
    )
    parser.add_argument(
        "--fixed-dealer",
        action="store_true",
        help="Keep the same dealer instead of rotating clockwise.",
    )
    parser.add_argument("--auctions", action="store_true", help="Print each auction.")
    parser.add_argument("--links", action="store_true", help="Print a hand-viewer link per board.")
    args = parser.parse_args(argv)

    cfg = TrialConfig(
        deals=args.deals,
        seed=args.seed,
        pass_bias=args.pass_bias,
        first_dealer=Position[args.dealer.upper()],
        rotate_dealer=not args.fixed_dealer,
        vulnerability=Vulnerability(args.vulnerability),
        show_auctions=args.auctions,
        show_links=args.links,
    )
    summary = run_trials(cfg)

    strains = ", ".join(f"{k}={v}" for k, v in sorted(summary.contracts_by_strain.items()))
    print(
        f"deals={summary.deals} passed_out={summary.passed_out} "
        f"contracts=[{strains}] "
        f"avg_declarer_tricks={summary.average_declarer_tricks():.2f} "
        f"bad_boards={summary.bad_boards}",
        flush=True,
    )


if __name__ == "__main__":
    main()
