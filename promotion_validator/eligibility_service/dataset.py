"""
Test corpus generation

Random campaign and membership code files with a controlled overlap.
"""

import logging
import random
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Set, Tuple, Union

from .models import MAX_CODE_LENGTH

logger = logging.getLogger(__name__)

CAMPAIGN_FILENAME = "campaign_codes.txt"
MEMBERSHIP_FILENAME = "membership_codes.txt"

# Distinct codes of length 1..MAX_CODE_LENGTH over a-z
CODE_SPACE_SIZE = sum(26 ** n for n in range(1, MAX_CODE_LENGTH + 1))


@dataclass
class GeneratedDataset:
    """Generated campaign and membership code sets"""
    campaign_codes: Set[str] = field(default_factory=set)
    membership_codes: Set[str] = field(default_factory=set)

    @property
    def overlap(self) -> Set[str]:
        return self.campaign_codes & self.membership_codes


def random_code(rng: random.Random) -> str:
    length = rng.randint(1, MAX_CODE_LENGTH)
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


def generate_dataset(
    campaign_count: int = 500_000,
    overlap_ratio: float = 0.4,
    membership_ratio: float = 0.6,
    seed: Optional[int] = None,
) -> GeneratedDataset:
    """
    Generate unique campaign codes and an overlapping membership set

    Each campaign code joins the membership set with probability
    overlap_ratio. The membership set is then topped up with codes that
    are not campaign codes until it holds campaign_count * membership_ratio
    codes.
    """
    if campaign_count < 0:
        raise ValueError("campaign_count must not be negative")
    if not 0.0 <= overlap_ratio <= 1.0:
        raise ValueError("overlap_ratio must be between 0 and 1")
    if membership_ratio < 0:
        raise ValueError("membership_ratio must not be negative")

    target_membership = int(campaign_count * membership_ratio)
    if campaign_count + target_membership > CODE_SPACE_SIZE:
        raise ValueError(
            f"cannot generate {campaign_count} campaign and {target_membership} "
            f"membership codes from {CODE_SPACE_SIZE} possible codes"
        )

    rng = random.Random(seed)
    dataset = GeneratedDataset()

    while len(dataset.campaign_codes) < campaign_count:
        dataset.campaign_codes.add(random_code(rng))

    # Sorted so a fixed seed gives the same overlap
    for code in sorted(dataset.campaign_codes):
        if rng.random() < overlap_ratio:
            dataset.membership_codes.add(code)

    while len(dataset.membership_codes) < target_membership:
        code = random_code(rng)
        if code not in dataset.campaign_codes:
            dataset.membership_codes.add(code)

    logger.info(
        f"Generated {len(dataset.campaign_codes)} campaign codes, "
        f"{len(dataset.membership_codes)} membership codes, "
        f"{len(dataset.overlap)} shared"
    )
    return dataset


def write_dataset(
    dataset: GeneratedDataset,
    output_dir: Union[str, Path] = "data",
) -> Tuple[Path, Path]:
    """Write both code sets, one code per line"""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    campaign_path = out / CAMPAIGN_FILENAME
    membership_path = out / MEMBERSHIP_FILENAME

    for path, codes in (
        (campaign_path, dataset.campaign_codes),
        (membership_path, dataset.membership_codes),
    ):
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for code in codes:
                f.write(code)
                f.write("\n")
        logger.debug(f"Wrote {len(codes)} codes to {path}")

    return campaign_path, membership_path


__all__ = [
    "GeneratedDataset",
    "generate_dataset",
    "write_dataset",
    "random_code",
    "CAMPAIGN_FILENAME",
    "MEMBERSHIP_FILENAME",
]
