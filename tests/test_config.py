"""Tests for analysis configuration."""

import os
from unittest.mock import patch

from bz_analysis.config import AnalysisConfig


class TestAnalysisConfig:
    """Test AnalysisConfig class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        config = AnalysisConfig.from_env()
        assert config.base_url == "https://bugzilla.mozilla.org"
        assert config.product == "Core"
        assert config.component == "Graphics: WebRender"
        assert config.root_alias == "wr-projects"
        assert config.rank_field == "cf_rank"
        assert config.api_key is None
        assert config.timeout == 60.0

    @patch.dict(
        os.environ,
        {
            "BUGZILLA_URL": "https://bz.example",
            "BUGZILLA_PRODUCT": "Firefox",
            "BUGZILLA_ROOT_ALIAS": "fx-meta",
            "BUGZILLA_TIMEOUT": "15",
        },
        clear=True,
    )
    def test_environment(self) -> None:
        """Test environment variables override defaults."""
        config = AnalysisConfig.from_env()
        assert config.base_url == "https://bz.example"
        assert config.product == "Firefox"
        assert config.root_alias == "fx-meta"
        assert config.timeout == 15.0

    @patch.dict(os.environ, {"BUGZILLA_PRODUCT": "Firefox"}, clear=True)
    def test_overrides_win(self) -> None:
        """Test explicit overrides beat the environment; None is ignored."""
        config = AnalysisConfig.from_env(product="Thunderbird", component=None)
        assert config.product == "Thunderbird"
        assert config.component == "Graphics: WebRender"

    @patch.dict(
        os.environ, {"BUGZILLA_COMPONENT": "", "BUGZILLA_RANK_FIELD": ""}, clear=True
    )
    def test_to_query_whole_product(self) -> None:
        """Test empty component and rank field are dropped from the query."""
        query = AnalysisConfig.from_env().to_query()
        assert query.product == "Core"
        assert query.component is None
        assert query.rank_field is None
