import pytest

from showtracker.address import extract_city_from_part, parse_address
from showtracker.models import AddressInfo


def test_zip_inside_state_component():
    info = parse_address("123 Main St, Brooklyn, NY 11201")
    assert (info.city, info.state, info.zip, info.country) == ("Brooklyn", "NY", "11201", "USA")
    assert info.full_address == "123 Main St, Brooklyn, NY 11201"


def test_standalone_zip_component():
    info = parse_address("500 Oak Ave, Austin, TX, 78701-1234")
    assert (info.city, info.state, info.zip) == ("Austin", "TX", "78701-1234")


def test_standalone_zip_needs_state_before_it():
    # "Texas" is not a two-letter state, so the ZIP alone does not decide it
    info = parse_address("500 Oak Ave, Austin, Texas, 78701")
    assert info.zip == ""
    assert info.city == "500 Oak Ave, Austin, Texas, 78701"


@pytest.mark.parametrize("address,state,zip_code", [
    ("1 A St, Portland, OR 97201", "OR", "97201"),
    ("22 Elm Rd, Salem, MA, 01970", "MA", "01970"),
    ("Venue Hall, 9 Pine Dr, Denver, CO 80202-5555", "CO", "80202-5555"),
])
def test_state_and_zip_extracted(address, state, zip_code):
    info = parse_address(address)
    assert info.state == state
    assert info.zip == zip_code
    assert info.country == "USA"


def test_uk_postcode_with_city_in_same_component():
    info = parse_address("10 Greek St, London W1D 4DH")
    assert info.city == "London"
    assert info.state == ""
    assert info.country == "UK"


def test_uk_postcode_alone_takes_city_from_previous_component():
    info = parse_address("Band on the Wall, 25 Swan St, Manchester, M4 5JZ")
    assert info.city == "Manchester"
    assert info.country == "UK"


def test_state_only():
    info = parse_address("The Basement, Nashville, TN")
    assert (info.city, info.state, info.zip, info.country) == ("Nashville", "TN", "", "USA")


def test_country_fallback():
    info = parse_address("Paradiso, Weteringschans 6, Amsterdam, Netherlands")
    assert info.city == "Amsterdam"
    assert info.state == ""
    assert info.country == "Netherlands"


def test_final_fallback_uses_whole_string():
    info = parse_address("somewhere 42")
    assert info == AddressInfo(full_address="somewhere 42", city="somewhere 42", state="", zip="", country="USA")


def test_empty_address():
    assert parse_address("") == AddressInfo(full_address="", city="", state="", zip="", country="USA")


def test_only_commas():
    info = parse_address(" , ,")
    assert info.city == " , ,"
    assert info.country == "USA"


@pytest.mark.parametrize("address", [
    "", " ", ",", "12345", "NY", "@@@, ###", "1, 2, 3, 4, 5", "a" * 500, "W1D 4DH", "::",
])
def test_never_raises(address):
    assert isinstance(parse_address(address), AddressInfo)


@pytest.mark.parametrize("part,city", [
    ("123 Main St", "Main St"),
    ("45 N Broadway", "Broadway"),
    ("Brooklyn", "Brooklyn"),
    ("7 West Street", "7 West Street"),
    ("North Hollywood", "Hollywood"),
    ("St Louis", "Louis"),
    ("100 Court St Music Row", "Music Row"),
    ("9 Ave of the Stars", "of the Stars"),
])
def test_extract_city_from_part(part, city):
    # Street words are only dropped before the first city word
    assert extract_city_from_part(part) == city


def test_extract_city_keeps_part_when_nothing_survives():
    assert extract_city_from_part("12 Main") == "Main"
    assert extract_city_from_part("North Street") == "North Street"
    assert extract_city_from_part("") == ""
