"""Tests for the CLI module."""

import logging
from unittest.mock import MagicMock, patch

from content_delivery.cli import main
from content_delivery.clients import NotFoundError
from schemas.asset import AssetSearchResult, deserialize_asset


def mock_client_class(mock_class):
    mock_client = MagicMock()
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    mock_class.return_value = mock_client
    return mock_client


class TestCLIGeneral:
    """Tests for global CLI behavior."""

    def test_no_command_prints_help(self, capsys):
        """Running without a command prints help."""
        result = main([])

        assert result == 0
        assert "content-delivery" in capsys.readouterr().out

    def test_requires_base_url(self, caplog):
        """Commands fail without --base-url."""
        result = main(["item", "CORE1"])

        assert result == 1
        assert "Must specify --base-url" in caplog.text

    @patch("content_delivery.cli.DeliveryClient")
    def test_config_from_arguments(self, mock_class, sample_content_item):
        """Global options become client config."""
        mock_client = mock_client_class(mock_class)
        mock_client.get_item.return_value = deserialize_asset(sample_content_item)

        main([
            "--base-url", "https://content.example.com",
            "--channel-token", "token123",
            "--timeout", "10",
            "item", "CORE1",
        ])

        config = mock_class.call_args.args[0]
        assert config["base_url"] == "https://content.example.com"
        assert config["channel_token"] == "token123"
        assert config["timeout"] == 10.0


class TestCLIItem:
    """Tests for the item command."""

    @patch("content_delivery.cli.DeliveryClient")
    def test_item(self, mock_class, sample_content_item, caplog):
        """item logs the item and its guessed fields."""
        caplog.set_level(logging.INFO)
        mock_client = mock_client_class(mock_class)
        mock_client.get_item.return_value = deserialize_asset(sample_content_item)

        result = main(["--base-url", "https://content.example.com", "item", "CORE1"])

        assert result == 0
        mock_client.get_item.assert_called_once_with("CORE1", expand=None)
        assert "title: TEXT::Spring Launch" in caplog.text
        assert "featured: BOOLEAN::true" in caplog.text

    @patch("content_delivery.cli.DeliveryClient")
    def test_item_by_slug_expanded(self, mock_class, sample_content_item):
        """--slug and --expand-all select the slug lookup with expansion."""
        mock_client = mock_client_class(mock_class)
        mock_client.get_item_by_slug.return_value = deserialize_asset(sample_content_item)

        result = main([
            "--base-url", "https://content.example.com",
            "item", "spring-launch", "--slug", "--expand-all",
        ])

        assert result == 0
        mock_client.get_item_by_slug.assert_called_once_with("spring-launch", expand="all")

    @patch("content_delivery.cli.DeliveryClient")
    def test_item_not_found(self, mock_class, caplog):
        """A failed fetch returns 1."""
        mock_client = mock_client_class(mock_class)
        mock_client.get_item.side_effect = NotFoundError("Item CORE1 not found")

        result = main(["--base-url", "https://content.example.com", "item", "CORE1"])

        assert result == 1
        assert "Failed to fetch item: Item CORE1 not found" in caplog.text


class TestCLISearch:
    """Tests for the search command."""

    @patch("content_delivery.cli.DeliveryClient")
    def test_search_by_type(self, mock_class, sample_search_response, caplog):
        """--type builds a type query."""
        caplog.set_level(logging.INFO)
        mock_client = mock_client_class(mock_class)
        mock_client.search_assets.return_value = AssetSearchResult.model_validate(
            sample_search_response
        )

        result = main([
            "--base-url", "https://content.example.com",
            "search", "--type", "Article", "--limit", "2",
        ])

        assert result == 0
        mock_client.search_assets.assert_called_once_with(
            query='type eq "Article"', limit=2, offset=0, total_results=True
        )
        assert "Showing 2 of 5" in caplog.text

    @patch("content_delivery.cli.DeliveryClient")
    def test_search_query_overrides_type(self, mock_class, sample_search_response):
        """--query is used as given."""
        mock_client = mock_client_class(mock_class)
        mock_client.search_assets.return_value = AssetSearchResult.model_validate(
            sample_search_response
        )

        main([
            "--base-url", "https://content.example.com",
            "search", "--type", "Article", "--query", 'name co "spring"',
        ])

        assert mock_client.search_assets.call_args.kwargs["query"] == 'name co "spring"'


class TestCLIRendition:
    """Tests for the rendition command."""

    @patch("content_delivery.cli.DeliveryClient")
    def test_native(self, mock_class, sample_digital_asset, caplog):
        """The native rendition URL is logged by default."""
        caplog.set_level(logging.INFO)
        mock_client = mock_client_class(mock_class)
        mock_client.get_digital_asset.return_value = deserialize_asset(sample_digital_asset)

        result = main([
            "--base-url", "https://content.example.com",
            "rendition", "CONT0000000000IMAGE",
        ])

        assert result == 0
        assert "https://example.com/assets/CONT0000000000IMAGE/native/hero.jpg" in caplog.text

    @patch("content_delivery.cli.DeliveryClient")
    def test_smallest(self, mock_class, sample_digital_asset, caplog):
        """--smallest logs the smallest rendition URL."""
        caplog.set_level(logging.INFO)
        mock_client = mock_client_class(mock_class)
        mock_client.get_digital_asset.return_value = deserialize_asset(sample_digital_asset)

        result = main([
            "--base-url", "https://content.example.com",
            "rendition", "CONT0000000000IMAGE", "--smallest",
        ])

        assert result == 0
        assert "https://example.com/renditions/jpg/150x112" in caplog.text

    @patch("content_delivery.cli.DeliveryClient")
    def test_unknown_rendition(self, mock_class, sample_digital_asset, caplog):
        """An unknown rendition name returns 1."""
        mock_client = mock_client_class(mock_class)
        mock_client.get_digital_asset.return_value = deserialize_asset(sample_digital_asset)

        result = main([
            "--base-url", "https://content.example.com",
            "rendition", "CONT0000000000IMAGE", "--name", "Poster",
        ])

        assert result == 1
        assert "No rendition URL found" in caplog.text
