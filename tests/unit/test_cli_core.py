from greenspace.cli import parse_args


def test_parse_args_defaults():
    args = parse_args(["search"])
    assert args.command == "search"
    assert args.search == ""
    assert args.facet == "all"
    assert args.pages == 1
    assert args.source is None
    assert args.overlay_config_dir is None


def test_parse_args_accepts_overlay_config_dir():
    args = parse_args(["stats", "--overlay-config-dir", "config/live", "--source", "parks.csv"])
    assert args.overlay_config_dir == "config/live"
    assert args.source == "parks.csv"
