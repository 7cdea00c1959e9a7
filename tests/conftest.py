from __future__ import annotations

import pandas as pd
import pytest


# Five listings covering the edge cases of every conversion:
#   101  CBD, good rating, plain "1 bath"
#   102  host_since after snapshot, "$1,200.00", shared baths, bad rating
#   103  half-bath, missing rating / response / superhost / bedrooms
#   104  CBD, heavy host, "0%", five amenities, bad rating
#   105  rating 4.8: between the median cutoff and the good threshold
RAW_ROWS = [
    {
        "id": "101", "listing_url": "https://www.airbnb.com/rooms/101", "name": "Downtown loft",
        "last_scraped": "2021-10-21", "host_since": "2015-10-21",
        "host_response_time": "within an hour", "host_response_rate": "100%",
        "host_is_superhost": "t", "host_listings_count": 1,
        "neighbourhood": "Asheville, North Carolina", "neighbourhood_cleansed": "28801",
        "property_type": "Entire loft", "room_type": "Entire home/apt",
        "accommodates": 4, "bathrooms_text": "1 bath", "bedrooms": 2, "beds": 2,
        "amenities": '["Wifi", "Kitchen", "Heating"]', "price": "$150.00",
        "minimum_nights": 2, "maximum_nights": 30, "review_scores_rating": 4.9,
    },
    {
        "id": "102", "listing_url": "https://www.airbnb.com/rooms/102", "name": "West side room",
        "last_scraped": "2021-10-21", "host_since": "2021-12-01",
        "host_response_time": "within a day", "host_response_rate": "87%",
        "host_is_superhost": "f", "host_listings_count": 12,
        "neighbourhood": None, "neighbourhood_cleansed": "28806",
        "property_type": "Private room in home", "room_type": "Private room",
        "accommodates": 2, "bathrooms_text": "1.5 shared baths", "bedrooms": 1, "beds": 1,
        "amenities": "Wifi,Kitchen", "price": "$1,200.00",
        "minimum_nights": 1, "maximum_nights": 365, "review_scores_rating": 4.5,
    },
    {
        "id": "103", "listing_url": "https://www.airbnb.com/rooms/103", "name": "Tiny home",
        "last_scraped": "2021-10-21", "host_since": "2019-01-15",
        "host_response_time": None, "host_response_rate": None,
        "host_is_superhost": None, "host_listings_count": 3,
        "neighbourhood": None, "neighbourhood_cleansed": "28704",
        "property_type": "Tiny home", "room_type": "Entire home/apt",
        "accommodates": 3, "bathrooms_text": "Half-bath", "bedrooms": None, "beds": 1,
        "amenities": "Wifi,Kitchen,Heating", "price": "$150.00",
        "minimum_nights": 1, "maximum_nights": 1125, "review_scores_rating": None,
    },
    {
        "id": "104", "listing_url": "https://www.airbnb.com/rooms/104", "name": "Suite near Pack Square",
        "last_scraped": "2021-10-21", "host_since": "2018-06-30",
        "host_response_time": "within a few hours", "host_response_rate": "0%",
        "host_is_superhost": "t", "host_listings_count": 250,
        "neighbourhood": "Asheville, North Carolina", "neighbourhood_cleansed": "28801",
        "property_type": "Entire guest suite", "room_type": "Entire home/apt",
        "accommodates": 2, "bathrooms_text": "2 baths", "bedrooms": 1, "beds": 1,
        "amenities": "Wifi,Kitchen,Heating,Washer,Dryer", "price": "$95.00",
        "minimum_nights": 3, "maximum_nights": 60, "review_scores_rating": 4.7,
    },
    {
        "id": "105", "listing_url": "https://www.airbnb.com/rooms/105", "name": "Family house",
        "last_scraped": "2021-10-21", "host_since": "2020-03-01",
        "host_response_time": "a few days or more", "host_response_rate": "50%",
        "host_is_superhost": "f", "host_listings_count": 2,
        "neighbourhood": None, "neighbourhood_cleansed": "28803",
        "property_type": "Entire rental unit", "room_type": "Entire home/apt",
        "accommodates": 6, "bathrooms_text": "2.5 baths", "bedrooms": 3, "beds": 4,
        "amenities": "Wifi", "price": "$310.00",
        "minimum_nights": 2, "maximum_nights": 14, "review_scores_rating": 4.8,
    },
]


@pytest.fixture
def raw_rows():
    return [dict(r) for r in RAW_ROWS]


@pytest.fixture
def listings_csv(tmp_path, raw_rows):
    path = tmp_path / "listings.csv"
    pd.DataFrame(raw_rows).to_csv(path, index=False)
    return path


@pytest.fixture
def raw_listings(listings_csv):
    from listings_eda.data.loader import load_listings
    return load_listings(listings_csv)


@pytest.fixture
def cleaned(raw_listings):
    from listings_eda.data.pipeline import run_pipeline
    return run_pipeline(raw_listings)


@pytest.fixture
def store(listings_csv):
    from listings_eda.data.store import ListingStore
    return ListingStore().load(listings_csv)
