"""
AppConfig Tests
===============

The injected configuration object that replaces a global singleton.
"""


class TestAppConfig:
    """Key/value behaviour and sharing between consumers."""

    def test_get_with_default(self):
        from patternbook.creational.app_config import AppConfig

        config = AppConfig({"mode": "production"})
        assert config.get("mode") == "production"
        assert config.get("region") is None
        assert config.get("region", "ap-south-1") == "ap-south-1"

    def test_set_and_keys(self):
        from patternbook.creational.app_config import AppConfig

        config = AppConfig()
        config.set("mode", "debug")
        config.set("region", "eu")
        assert config.keys == ["mode", "region"]
        assert "mode" in config
        assert "missing" not in config

    def test_initial_mapping_is_copied(self):
        from patternbook.creational.app_config import AppConfig

        initial = {"mode": "production"}
        config = AppConfig(initial)
        initial["mode"] = "changed"
        assert config.get("mode") == "production"

    def test_consumers_share_instance(self):
        from patternbook.creational.app_config import AppConfig, NotificationService, OrderService

        config = AppConfig({"mode": "production"})
        orders = OrderService(config)
        alerts = NotificationService(config)

        config.set("mode", "maintenance")
        assert "maintenance" in orders.describe()
        assert "maintenance" in alerts.describe()
        assert orders.config is alerts.config

    def test_separate_instances_are_isolated(self):
        from patternbook.creational.app_config import AppConfig

        a = AppConfig()
        b = AppConfig()
        a.set("mode", "x")
        assert b.get("mode") is None

    def test_from_settings(self):
        from patternbook.config import Settings
        from patternbook.creational.app_config import AppConfig

        config = AppConfig.from_settings(Settings(app_config={"mode": "staging"}))
        assert config.get("mode") == "staging"

    def test_demo(self, capsys):
        from patternbook.creational.app_config import main

        main()
        out = capsys.readouterr().out
        assert "Same Instance? True" in out
        assert "production" in out
