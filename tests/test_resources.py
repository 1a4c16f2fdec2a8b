from sitetheme import DEFAULT_THEME_NAME, AssetKind, ThemeAssets, builtin_assets

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestBuiltinBundle:
    """Tests for the default theme shipped as package data."""

    def test_default_name(self):
        assert DEFAULT_THEME_NAME == "simple"

    def test_all_slots_populated(self):
        assets = builtin_assets()
        assert isinstance(assets, ThemeAssets)
        assert all(assets[kind] for kind in AssetKind)

    def test_images_are_png(self):
        assets = builtin_assets()
        assert assets[AssetKind.FAVICON].startswith(PNG_SIGNATURE)
        assert assets[AssetKind.LOGO].startswith(PNG_SIGNATURE)

    def test_templates_reference_static_assets(self):
        base = builtin_assets().templates()["base.tpl"]
        for kind in (AssetKind.MAIN_CSS, AssetKind.HIGHLIGHT_CSS, AssetKind.MAIN_JS):
            assert kind.relpath in base

    def test_cached(self):
        assert builtin_assets() is builtin_assets()
