"""Synthetic property catalog generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from property_risk.generators.base import BaseGenerator
from property_risk.models import Property


class PropertyGenerator(BaseGenerator):
    """Generate catalog records resembling foreclosed-property listings."""

    LOCATIONS = [
        "Antipolo City",
        "Bacoor City",
        "Cebu City",
        "Davao City",
        "Imus City",
        "Iloilo City",
        "Quezon City",
        "San Jose del Monte City",
    ]

    PROP_GROUP_TYPES = ["Residential", "Commercial", "Agricultural", "Industrial"]
    PROP_GROUP_WEIGHTS = [0.75, 0.12, 0.08, 0.05]

    STATUSES = ["Unoccupied", "Occupied"]
    STATUS_WEIGHTS = [0.65, 0.35]

    # Appraisals and inspections within the last three years
    MAX_DAYS_AGO = 3 * 365

    def __init__(
        self,
        seed: int | None = None,
        reference_date: date | None = None,
        locations: list[str] | None = None,
    ) -> None:
        super().__init__(seed)
        self.reference_date = reference_date or date.today()
        self.locations = locations or self.LOCATIONS

    def generate(self) -> Property:
        """Generate a single property.

        Returns
        -------
        Property
            Generated property.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Property:
        prop_type = random.choices(self.PROP_GROUP_TYPES, weights=self.PROP_GROUP_WEIGHTS, k=1)[0]

        # Log-normal prices, median around 1M, spread across all risk tiers
        price = random.lognormvariate(mu=13.8, sigma=1.0)
        lot_area = round(random.uniform(40, 600), 2)
        floor_area = 0.0 if prop_type == "Agricultural" else round(random.uniform(0.3, 0.9) * lot_area, 2)

        appr_days_ago = random.randint(0, self.MAX_DAYS_AGO)
        inspection_days_ago = random.randint(0, appr_days_ago)

        return Property(
            id=self.fake.uuid4(),
            min_sell_price=Decimal(str(round(price, 2))),
            city_municipality=random.choice(self.locations),
            prop_group_type=prop_type,
            status=random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            lot_area=lot_area,
            floor_area=floor_area,
            required_gross=Decimal(str(round(price * 0.1, 2))),
            appr_date=self.reference_date - timedelta(days=appr_days_ago),
            inspection_date=self.reference_date - timedelta(days=inspection_days_ago),
            appr_days_ago=appr_days_ago,
            inspection_days_ago=inspection_days_ago,
        )
