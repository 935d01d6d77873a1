"""Sample locations served when the geospatial store is unavailable.

Downtown Toronto examples. Coordinates are canonical latitude/longitude and
distances are left for the pipeline to compute.
"""

from __future__ import annotations

from safebed.domain.entities import Location
from safebed.domain.enums import GenderRestriction, LocationCategory

_WEEKDAYS_9_TO_5 = {
    "mon": [["09:00", "17:00"]],
    "tue": [["09:00", "17:00"]],
    "wed": [["09:00", "17:00"]],
    "thu": [["09:00", "17:00"]],
    "fri": [["09:00", "17:00"]],
    "sat": [],
    "sun": [],
}

_ALL_DAY = {day: [["00:00", "23:59"]] for day in ("sun", "mon", "tue", "wed", "thu", "fri", "sat")}

_OVERNIGHT = {day: [["19:00", "08:00"]] for day in ("sun", "mon", "tue", "wed", "thu", "fri", "sat")}

SAMPLE_LOCATIONS: tuple[Location, ...] = (
    Location(
        id="sample-shelter-queen-west",
        name="Queen West Emergency Shelter",
        category=LocationCategory.SHELTER,
        phone="416-555-0101",
        website="https://example.org/queen-west-shelter",
        address="220 Queen St W, Toronto, ON",
        notes="Intake at the side door after 7pm.",
        capacity=80,
        beds_available=6,
        hours=_OVERNIGHT,
        accessible=True,
        pets_allowed=False,
        gender_restriction=GenderRestriction.ALL,
        lgbtq_friendly=True,
        source="sample",
        latitude=43.6505,
        longitude=-79.3885,
    ),
    Location(
        id="sample-shelter-womens-dundas",
        name="Dundas Women's Residence",
        category=LocationCategory.SHELTER,
        phone="416-555-0102",
        address="15 Dundas St E, Toronto, ON",
        capacity=40,
        beds_available=0,
        hours=_ALL_DAY,
        accessible=True,
        pets_allowed=True,
        gender_restriction=GenderRestriction.WOMEN,
        lgbtq_friendly=True,
        source="sample",
        latitude=43.6561,
        longitude=-79.3802,
    ),
    Location(
        id="sample-food-bank-church",
        name="Church Street Community Food Bank",
        category=LocationCategory.FOOD_BANK,
        phone="416-555-0103",
        website="https://example.org/church-food-bank",
        address="477 Church St, Toronto, ON",
        hours={
            "tue": [["10:00", "14:00"]],
            "thu": [["10:00", "14:00"], ["17:00", "19:00"]],
            "sat": [["09:00", "12:00"]],
        },
        accessible=False,
        source="sample",
        latitude=43.6646,
        longitude=-79.3806,
    ),
    Location(
        id="sample-warming-metro-hall",
        name="Metro Hall Warming Centre",
        category=LocationCategory.WARMING_COOLING,
        address="55 John St, Toronto, ON",
        notes="Opens when Environment Canada issues an extreme cold warning.",
        capacity=100,
        hours=_ALL_DAY,
        accessible=True,
        pets_allowed=True,
        source="sample",
        latitude=43.6458,
        longitude=-79.3900,
    ),
    Location(
        id="sample-drop-in-sherbourne",
        name="Sherbourne Drop-In",
        category=LocationCategory.DROP_IN,
        phone="416-555-0105",
        address="200 Sherbourne St, Toronto, ON",
        hours=_WEEKDAYS_9_TO_5,
        accessible=None,
        gender_restriction=GenderRestriction.MEN,
        source="sample",
        latitude=43.6573,
        longitude=-79.3707,
    ),
    Location(
        id="sample-clinic-parliament",
        name="Parliament Street Health Clinic",
        category=LocationCategory.CLINIC,
        phone="416-555-0106",
        website="https://example.org/parliament-clinic",
        address="410 Parliament St, Toronto, ON",
        hours=_WEEKDAYS_9_TO_5,
        accessible=True,
        source="sample",
        latitude=43.6621,
        longitude=-79.3665,
    ),
    Location(
        id="sample-harm-reduction-queen-east",
        name="Queen East Harm Reduction Site",
        category=LocationCategory.HARM_REDUCTION,
        phone="416-555-0107",
        address="60 Queen St E, Toronto, ON",
        hours={day: [["10:00", "22:00"]] for day in ("mon", "tue", "wed", "thu", "fri", "sat")},
        accessible=True,
        lgbtq_friendly=True,
        source="sample",
        latitude=43.6529,
        longitude=-79.3770,
    ),
    Location(
        id="sample-washroom-nathan-phillips",
        name="Nathan Phillips Square Public Washroom",
        category=LocationCategory.WASHROOM,
        address="100 Queen St W, Toronto, ON",
        hours={day: [["06:00", "23:00"]] for day in ("sun", "mon", "tue", "wed", "thu", "fri", "sat")},
        accessible=True,
        source="sample",
        latitude=43.6525,
        longitude=-79.3835,
    ),
    Location(
        id="sample-outreach-mobile",
        name="Mobile Outreach Van",
        category=LocationCategory.OUTREACH,
        phone="416-555-0109",
        notes="Route changes nightly; call for the current stop.",
        hours=None,
        source="sample",
    ),
)
