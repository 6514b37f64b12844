import importlib.util
import json
import os

from dimensional_cache import PlaneCache, StrategyFactory, load_config_from_json

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _load_script():
    path = os.path.join(REPO_ROOT, "scripts", "print_load_order.py")
    spec = importlib.util.spec_from_file_location("print_load_order", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_config_loading():
    """测试从config.json加载配置并构建策略"""
    config = load_config_from_json()
    strategy = StrategyFactory.create_strategy(config)
    assert strategy.lengths == (7, 8)

    # 与文档中的 7Z x 8T 示意图一致
    order = strategy.get_load_order((3, 3))
    assert order == [
        (3, 3), (3, 4), (4, 3), (3, 2), (2, 3), (3, 5), (5, 3), (3, 1), (1, 3),
    ]

    cache = PlaneCache(strategy, lambda pos: pos, capacity=config.plane_cache.capacity)
    cache.set_position((3, 3))
    assert cache.cached_positions() == order


def test_print_load_order_script(tmp_path, capsys):
    script = _load_script()
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"cache_strategy": {"lengths": [7]}}), encoding="utf-8")

    assert script.main(["--config", str(cfg), "--position", "3"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["3", "4", "2", "5", "1", "6", "0"]

    assert script.main(["--config", str(cfg), "--position", "3", "--limit", "2", "--offsets"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["0\t3\t+0", "1\t4\t+1"]


def test_print_load_order_script_errors(tmp_path, capsys):
    script = _load_script()
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"cache_strategy": {"lengths": [7]}}), encoding="utf-8")

    assert script.main(["--config", str(cfg), "--position", "9"]) == 2
    assert "error:" in capsys.readouterr().err
    assert script.main(["--config", str(tmp_path / "missing.json"), "--position", "0"]) == 2
