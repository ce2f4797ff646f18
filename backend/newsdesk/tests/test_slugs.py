from newsdesk.utils.slugs import slugify


def test_slugify_spells_out_symbols():
	assert slugify("Coimbatore airport records 11% rise in passenger traffic") == (
		"coimbatore-airport-records-11percent-rise-in-passenger-traffic"
	)
	assert slugify("Fish & Chips") == "fish-and-chips"


def test_slugify_drops_punctuation():
	assert slugify("Coimbatore: The Rising Powerhouse of South India's Real Estate Market") == (
		"coimbatore-the-rising-powerhouse-of-south-indias-real-estate-market"
	)


def test_slugify_collapses_separators_and_accents():
	assert slugify("  Café   --  Réunion  ") == "cafe-reunion"
	assert slugify("") == ""
