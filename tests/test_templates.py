"""
Tests for the component template builders
"""
from sdui_service.data.sample_products import listings_for
from sdui_service.models.schemas.core import Mode
from sdui_service.services import templates as t
from sdui_service.services.theme_palette import theme_for

DAY = theme_for(Mode.DAY)
NIGHT = theme_for(Mode.NIGHT)
FLASH = theme_for(Mode.FLASH_SALE)


class TestStyleDefaults:
    """Default styling is derived from the theme, overrides win"""

    def test_header_defaults_follow_theme(self):
        node = t.header("h", "Hello", theme=DAY)
        assert node.style == {"padding": 16.0, "fontSize": 32.0, "color": "#2C3E50"}

    def test_header_defaults_change_with_mode(self):
        node = t.header("h", "Hello", theme=NIGHT)
        assert node.style["fontSize"] == 40.0
        assert node.style["padding"] == 20.0

    def test_override_replaces_and_extends(self):
        node = t.header("h", "Hello", theme=DAY, style={"padding": 0.0, "fontWeight": "bold"})
        assert node.style["padding"] == 0.0
        assert node.style["fontWeight"] == "bold"
        assert node.style["color"] == DAY.primary_color

    def test_dark_theme_prices_use_accent(self):
        node = t.product_grid("g", [], theme=NIGHT)
        assert node.style["priceColor"] == NIGHT.accent_color

    def test_light_theme_prices_use_primary(self):
        node = t.product_carousel("c", [], theme=DAY)
        assert node.style["priceColor"] == DAY.primary_color

    def test_search_bar_surface_follows_darkness(self):
        assert t.search_bar("s", theme=DAY).style["backgroundColor"] == "#FFFFFF"
        assert t.search_bar("s", theme=NIGHT).style["backgroundColor"] == "#1A1A1A"

    def test_promo_badge_is_a_pill(self):
        node = t.promo_badge("b", "FREE SHIPPING", theme=FLASH)
        assert node.style == {
            "backgroundColor": "#FF4757",
            "paddingX": 16.0,
            "paddingY": 8.0,
            "borderRadius": 20.0,
            "fontSize": 12.0,
        }

    def test_spacer_has_no_style(self):
        node = t.spacer("gap", 12.0)
        assert node.props == {"height": 12.0}
        assert node.style == {}


class TestProps:

    def test_unset_optional_props_are_omitted(self):
        node = t.header("h", "Hello", theme=DAY)
        assert node.props == {"title": "Hello"}

    def test_icon_turns_on_show_icon(self):
        node = t.header("h", "Hello", theme=DAY, icon="star")
        assert node.props["showIcon"] is True
        assert node.props["icon"] == "star"

    def test_values_are_not_validated(self):
        node = t.rating("r", 42.0, theme=DAY, max_stars=-1)
        assert node.props["rating"] == 42.0
        assert node.props["maxStars"] == -1

    def test_banner_gradient_and_action(self):
        node = t.banner(
            "b", "Sale",
            theme=DAY,
            gradient=["#000000", "#FFFFFF"],
            action=t.navigate_action("/deals"),
        )
        assert node.style["gradient"] == {"colors": ["#000000", "#FFFFFF"]}
        assert node.action == {"type": "navigate", "route": "/deals"}

    def test_banner_without_gradient(self):
        assert "gradient" not in t.banner("b", "Sale", theme=DAY).style

    def test_countdown_props(self):
        node = t.countdown_timer("c", "ENDS IN", "1:00:00", theme=FLASH)
        assert node.props == {"label": "ENDS IN", "end_time": "1:00:00", "showIcon": True}

    def test_product_cards_serialized_without_empty_fields(self):
        node = t.product_grid("g", listings_for(Mode.LATE_NIGHT), theme=DAY, columns=1)
        first = node.props["products"][0]
        assert first == {
            "id": "p1",
            "name": "Midnight Silk Robe",
            "price": 189.0,
            "image_url": "https://via.placeholder.com/200/1A1A2E/FFFFFF?text=Silk+Robe",
        }
        assert node.props["columns"] == 1
        assert node.props["spacing"] == DAY.spacing["md"]

    def test_list_inputs_are_copied(self):
        stories = [{"id": "s1", "name": "New"}]
        node = t.story_circle("s", stories, theme=DAY)
        stories[0]["name"] = "Changed"
        assert node.props["stories"][0]["name"] == "New"


class TestContainers:

    def test_children_keep_caller_order(self):
        children = [t.spacer("a", 1.0), t.spacer("b", 2.0), t.spacer("c", 3.0)]
        node = t.container("box", children, theme=DAY)
        assert [child.id for child in node.children] == ["a", "b", "c"]

    def test_row_alignment(self):
        node = t.row("r", [t.spacer("a", 1.0)], theme=FLASH)
        assert node.props == {"alignment": "spaceEvenly"}
        assert node.style == {"padding": 12.0}

    def test_leaves_have_no_children(self):
        assert t.avatar("a", "John Doe").children is None

    def test_walk_visits_depth_first(self):
        inner = t.container("inner", [t.spacer("leaf", 1.0)], theme=DAY)
        outer = t.container("outer", [inner, t.spacer("tail", 1.0)], theme=DAY)
        assert [node.id for node in outer.walk()] == ["outer", "inner", "leaf", "tail"]
