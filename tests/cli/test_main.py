"""
Tests for CLI argument handling and dispatch.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from vue_class_transform.cli.__main__ import main


@patch("vue_class_transform.cli.commands.handle_transform")
def test_transform_args_forwarded(mock_handle):
  mock_handle.return_value = 0
  assert main(["transform", "App.vue", "--line", "12", "--in-place"]) == 0

  mock_handle.assert_called_once_with(Path("App.vue"), 12, None, True, None, None, None)


@patch("vue_class_transform.cli.commands.handle_transform")
def test_transform_overrides(mock_handle):
  mock_handle.return_value = 0
  main(["transform", "a.vue", "--line", "0", "--line-base", "0", "--dry-run", "--json-trace", "t.json"])

  args = mock_handle.call_args[0]
  assert args[4] is True  # dry_run
  assert args[5] == 0  # line_base
  assert args[6] == Path("t.json")


def test_out_and_in_place_are_exclusive():
  with pytest.raises(SystemExit):
    main(["transform", "a.vue", "--line", "1", "--out", "b.vue", "--in-place"])


@patch("vue_class_transform.cli.commands.handle_convert")
def test_convert_dispatch(mock_handle):
  mock_handle.return_value = 1
  assert main(["convert", 'class="a"']) == 1
  mock_handle.assert_called_once_with('class="a"')
