"""Simulate an election against the voting contract.

Generates fake voter addresses and ballots using faker with a fixed seed,
registers every voter, submits salted vote commitments through the contract
call surface, closes voting part-way if asked, and prints a JSON summary.

Usage:
    python scripts/simulate_election.py
    python scripts/simulate_election.py --voters 500 --close-after 400
    python scripts/simulate_election.py --seed 7 -v
"""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

from faker import Faker

sys.path.insert(0, str(Path(__file__).parent.parent))

from zkvote.call import call_contract
from zkvote.commitments import compute_commitment
from zkvote.registry import ElectionRegistry

SEED = 20260201
DEFAULT_VOTERS = 50
NUM_CANDIDATES = 3

# c32 alphabet used by Stacks principal addresses
ADDRESS_LETTERS = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ADDRESS_PATTERN = "ST" + "?" * 39


def generate_voters(fake: Faker, count: int) -> list[str]:
    """Generate distinct fake principal addresses."""
    return [
        fake.unique.bothify(ADDRESS_PATTERN, letters=ADDRESS_LETTERS)
        for _ in range(count)
    ]


def run_simulation(
    num_voters: int, seed: int, close_after: int | None = None, admin: str | None = None
) -> dict:
    """Run a simulated election and return a summary.

    Every voter registers and then tries to vote (some try twice). Once
    close_after votes are in, the administrator closes voting and the
    remaining voters are turned away.
    """
    fake = Faker()
    Faker.seed(seed)

    voters = generate_voters(fake, num_voters)
    administrator = admin or voters[0]
    candidates = [fake.unique.last_name() for _ in range(NUM_CANDIDATES)]
    registry = ElectionRegistry(administrator)

    rejections: Counter[str] = Counter()
    accepted: list[str] = []

    def record(result):
        if not result.success:
            rejections[result.error.value] += 1
        return result

    for voter in voters:
        record(call_contract(registry, "register-voter", voter))

    # Non-administrator close attempt, always rejected
    if len(voters) > 1 and voters[1] != administrator:
        record(call_contract(registry, "close-voting", voters[1]))

    for voter in voters:
        if close_after is not None and len(accepted) == close_after:
            record(call_contract(registry, "close-voting", administrator))

        ballot = fake.random_element(candidates)
        commitment = compute_commitment(ballot, fake.hexify("^" * 32)).value
        result = record(call_contract(registry, "submit-vote", voter, commitment))
        if result.success:
            accepted.append(commitment)
            if fake.boolean(chance_of_getting_true=10):
                record(call_contract(registry, "submit-vote", voter, commitment))

    return {
        "administrator": administrator,
        "candidates": candidates,
        "registered": num_voters,
        "total_votes": call_contract(registry, "get-total-votes", administrator).value,
        "voting_open": call_contract(registry, "is-voting-open", administrator).value,
        "rejections": dict(sorted(rejections.items())),
        "all_commitments_verified": all(
            call_contract(registry, "verify-vote", administrator, c).value
            for c in accepted
        ),
    }


def main():
    parser = argparse.ArgumentParser(description="Simulate an election")
    parser.add_argument("--voters", type=int, default=DEFAULT_VOTERS,
                        help=f"Number of voters (default: {DEFAULT_VOTERS})")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Faker seed (default: {SEED})")
    parser.add_argument("--close-after", type=int, default=None,
                        help="Close voting once this many votes are in")
    parser.add_argument("--admin", default=None,
                        help="Administrator address (default: first voter)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every contract call")
    args = parser.parse_args()

    if args.voters < 1:
        parser.error("--voters must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    summary = run_simulation(args.voters, args.seed, args.close_after, args.admin)
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
