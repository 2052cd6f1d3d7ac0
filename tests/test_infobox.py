"""Tests for infobox extraction."""

from wikiquery.infobox import parse_infobox


class TestParseInfobox:
    """Tests for parse_infobox function."""

    def test_simple_infobox(self):
        """Key/value pairs should be stripped of whitespace."""
        text = "{{Infobox settlement\n| name = Paris\n| country =  France \n}}\nParis is..."
        assert parse_infobox(text) == {"name": "Paris", "country": "France"}

    def test_case_insensitive_name(self):
        text = "{{infobox Ville\n|nom=Lyon\n}}"
        assert parse_infobox(text) == {"nom": "Lyon"}

    def test_skips_other_templates(self):
        """Templates before the infobox should be ignored."""
        text = "{{Short description|Capital of France}}\n{{Infobox settlement\n| name = Paris\n}}"
        assert parse_infobox(text) == {"name": "Paris"}

    def test_first_infobox_only(self):
        text = "{{Infobox A\n| a = 1\n}}\n{{Infobox B\n| b = 2\n}}"
        assert parse_infobox(text) == {"a": "1"}

    def test_links_reduced_to_text(self):
        text = "{{Infobox person\n| spouse = [[Jane Doe|Jane]]\n| birth_place = [[Gotham City]]\n}}"
        info = parse_infobox(text)
        assert info["spouse"] == "Jane"
        assert info["birth_place"] == "Gotham City"

    def test_comments_removed(self):
        text = "{{Infobox person\n| name = Bruce <!-- alias -->\n}}"
        assert parse_infobox(text)["name"] == "Bruce"

    def test_no_infobox(self):
        assert parse_infobox("'''Batman''' is a superhero.") == {}

    def test_empty_text(self):
        assert parse_infobox("") == {}
