from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

from gatkreport.services.progress import ShardProgress, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True
    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


class TestShardProgress:
    def test_bar_created_on_tty(self):
        with patch("gatkreport.services.progress.is_tty_enabled", return_value=True), \
             patch("gatkreport.services.progress.tqdm") as mock_tqdm:
            progress = ShardProgress(5, label="Test shards")

            assert progress.drawing is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Test shards",
                unit="shard",
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_no_bar_off_tty(self):
        with patch("gatkreport.services.progress.is_tty_enabled", return_value=False), \
             patch("gatkreport.services.progress.tqdm") as mock_tqdm:
            progress = ShardProgress(5)
            assert progress.drawing is False
            mock_tqdm.assert_not_called()

    def test_disabled_by_setting_even_on_tty(self):
        with patch("gatkreport.services.progress.is_tty_enabled", return_value=True), \
             patch("gatkreport.services.progress.tqdm") as mock_tqdm:
            progress = ShardProgress(5, enabled=False)
            assert progress.drawing is False
            mock_tqdm.assert_not_called()

    def test_shard_lifecycle_updates_bar(self):
        mock_bar = Mock()
        with patch("gatkreport.services.progress.is_tty_enabled", return_value=True), \
             patch("gatkreport.services.progress.tqdm", return_value=mock_bar):
            with ShardProgress(2, label="Gathering") as progress:
                progress.reading(Path("shard0.grp"))
                mock_bar.set_description.assert_called_with("Gathering (shard0.grp)")
                progress.read(3)
                progress.read(4)
                assert mock_bar.update.call_count == 2
                mock_bar.set_description.assert_called_with("Gathering")
                mock_bar.set_postfix.assert_called_with(rows=7)
            mock_bar.close.assert_called_once()
            assert progress.drawing is False

    def test_counts_without_a_bar(self):
        with patch("gatkreport.services.progress.is_tty_enabled", return_value=False):
            progress = ShardProgress(2)
            progress.reading(Path("x.grp"))
            progress.read(10)
            progress.close()
            assert (progress.shards_read, progress.rows_read) == (1, 10)
