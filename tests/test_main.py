"""Tests for the command-line entry point."""

import logging

import pytest
import yaml

from fakes import FakeCounterSource, FakeQueryProvider
from sysinfo_explorer import main as cli
from sysinfo_explorer.collectors import explorer as explorer_module
from sysinfo_explorer.core.config import Config
from sysinfo_explorer.core.errors import (
    CounterUnavailableError,
    InvalidArgumentError,
    ProviderError,
    SamplingError,
)
from sysinfo_explorer.stats.counters import COUNTERS


class FakePdh(FakeCounterSource):
    """Counter source with the listing and close calls of PdhCounterSource."""

    def __init__(self, values=None, missing=None):
        super().__init__(values or {}, missing)
        self.opened = []
        self.closed = False

    def open_counters(self, specs):
        for spec in specs:
            if spec.counter in self.missing:
                raise CounterUnavailableError(f"Counter {spec.path} is not available", spec.path)
            self.opened.append(spec.path)

    def list_categories(self):
        return ["Memory", "Processor"]

    def list_counters(self, category):
        if category == "Bogus":
            raise CounterUnavailableError(f"Unknown counter category {category}")
        return ["% Processor Time", "% Idle Time"], ["0", "_Total"]

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("SYSINFO_OUTPUT_FILE", "SYSINFO_APPEND", "SYSINFO_WMI_NAMESPACE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_pdh(monkeypatch, counter_values):
    source = FakePdh(dict(counter_values, **{"% Processor Time": 5.0}))
    monkeypatch.setattr(cli, "PdhCounterSource", lambda: source)
    return source


@pytest.fixture
def recorded_runs(monkeypatch):
    runs = []

    def fake_run_stats(sampler, iterations):
        runs.append((sampler, iterations))
        return iterations

    monkeypatch.setattr(cli, "run_stats", fake_run_stats)
    return runs


class TestArguments:
    """Tests for argument parsing."""

    @pytest.mark.parametrize("argv", [[], ["-e", "a", "b"], ["-e", "a", "-s", "3"], ["--bogus"]])
    def test_usage_errors(self, argv, capsys) -> None:
        assert cli.main(argv) == cli.EXIT_USAGE
        assert "The input arguments are invalid" in capsys.readouterr().err

    def test_parse_iterations(self) -> None:
        assert cli.parse_iterations("3") == 3
        assert cli.parse_iterations(" 12 ") == 12

    @pytest.mark.parametrize("text", ["0", "-1", "abc", "1.5", ""])
    def test_parse_iterations_rejects(self, text) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid number of iterations"):
            cli.parse_iterations(text)


class TestStatsCommand:
    """Tests for -s/--stats."""

    @pytest.mark.parametrize("value", ["0", "abc", "-2"])
    def test_invalid_iterations(self, value, fake_pdh, recorded_runs, capsys) -> None:
        assert cli.main(["-s", value]) == cli.EXIT_USAGE

        out = capsys.readouterr().out
        assert "Running the quick statistics instance..." in out
        assert "Invalid number of iterations (>0)" in out
        assert recorded_runs == []
        assert fake_pdh.reads == []

    def test_runs_sampler(self, fake_pdh, recorded_runs, monkeypatch) -> None:
        monkeypatch.setattr(
            cli,
            "WMIQueryProvider",
            lambda namespace: FakeQueryProvider({"Win32_ComputerSystem": [{"TotalPhysicalMemory": 1048576 * 8192}]}),
        )

        assert cli.main(["-s", "3"]) == cli.EXIT_OK

        sampler, iterations = recorded_runs[0]
        assert iterations == 3
        assert sampler.total_memory_mb == 8192
        assert fake_pdh.opened == [spec.path for spec in COUNTERS]
        assert fake_pdh.closed is True

    def test_without_wmi_memory_reads_zero(self, fake_pdh, recorded_runs, monkeypatch) -> None:
        def unavailable(namespace):
            raise ProviderError("WMI is not available on this platform")

        monkeypatch.setattr(cli, "WMIQueryProvider", unavailable)

        assert cli.main(["--stats", "2"]) == cli.EXIT_OK
        assert recorded_runs[0][0].total_memory_mb == 0

    def test_counters_unavailable(self, monkeypatch, recorded_runs) -> None:
        def unavailable():
            raise CounterUnavailableError("Performance counters are not available on this platform")

        monkeypatch.setattr(cli, "PdhCounterSource", unavailable)

        assert cli.main(["-s", "2"]) == cli.EXIT_FAILURE
        assert recorded_runs == []

    def test_missing_counter_fails_at_startup(self, monkeypatch, recorded_runs) -> None:
        source = FakePdh(missing={"Handle Count"})
        monkeypatch.setattr(cli, "PdhCounterSource", lambda: source)

        assert cli.main(["-s", "2"]) == cli.EXIT_FAILURE
        assert recorded_runs == []
        assert source.closed is True

    def test_sampling_failure(self, fake_pdh, monkeypatch, capsys) -> None:
        def failing_run_stats(sampler, iterations):
            raise SamplingError("Sampling failed: Counter Handle Count is not available")

        monkeypatch.setattr(cli, "WMIQueryProvider", lambda namespace: FakeQueryProvider({}))
        monkeypatch.setattr(cli, "run_stats", failing_run_stats)

        assert cli.main(["-s", "2"]) == cli.EXIT_FAILURE
        assert "Exception: Sampling failed" in capsys.readouterr().err
        assert fake_pdh.closed is True


class TestExploreCommand:
    """Tests for -e/--explore."""

    @pytest.fixture
    def fake_wmi(self, monkeypatch, platform_info, cpu_bag):
        provider = FakeQueryProvider({"Win32_Processor": [cpu_bag]})
        monkeypatch.setattr(explorer_module, "WMIQueryProvider", lambda namespace: provider)
        monkeypatch.setattr(explorer_module, "collect_platform_info", lambda include_environment: platform_info)
        return provider

    def test_configured_report_file(self, fake_wmi, tmp_path) -> None:
        config = Config()
        config.report.output_filename = "from_yaml.txt"
        config.to_yaml(str(tmp_path / "config.yaml"))

        assert cli.main(["-c", "config.yaml", "-e"]) == cli.EXIT_OK

        assert (tmp_path / "from_yaml.txt").exists()

    def test_env_report_file(self, fake_wmi, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("SYSINFO_OUTPUT_FILE", "from_env.txt")

        assert cli.main(["--explore"]) == cli.EXIT_OK

        assert (tmp_path / "from_env.txt").exists()
        assert not (tmp_path / "devices.txt").exists()

    def test_command_line_file_wins(self, fake_wmi, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("SYSINFO_OUTPUT_FILE", "from_env.txt")

        assert cli.main(["-e", "cli.txt"]) == cli.EXIT_OK

        assert sorted(p.name for p in tmp_path.iterdir()) == ["cli.txt"]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_file_name(self, fake_wmi, tmp_path, name, capsys) -> None:
        assert cli.main(["-e", name]) == cli.EXIT_USAGE

        captured = capsys.readouterr()
        assert "output file name is empty" in captured.err
        assert "Report written" not in captured.out
        assert fake_wmi.queries == []
        assert list(tmp_path.iterdir()) == []

    def test_empty_configured_file_name(self, fake_wmi, tmp_path) -> None:
        (tmp_path / "config.yaml").write_text(yaml.dump({"report": {"output_filename": " "}}))

        assert cli.main(["-c", "config.yaml", "-e"]) == cli.EXIT_USAGE
        assert fake_wmi.queries == []

    def test_writes_report(self, tmp_path, monkeypatch, platform_info, cpu_bag, memory_bag, capsys) -> None:
        provider = FakeQueryProvider({"Win32_Processor": [cpu_bag], "Win32_PhysicalMemory": [memory_bag]})
        monkeypatch.setattr(explorer_module, "WMIQueryProvider", lambda namespace: provider)
        monkeypatch.setattr(explorer_module, "collect_platform_info", lambda include_environment: platform_info)

        assert cli.main(["-e", "  devices.txt "]) == cli.EXIT_OK

        out = capsys.readouterr().out
        assert "Running the hardware explorer instance... (This may take few minutes)" in out
        assert "2 records" in out
        report = (tmp_path / "devices.txt").read_text(encoding="utf-8")
        assert "********** Processor Info **********" in report
        assert "Detected video controllers: 0" in report

    def test_wmi_unavailable(self, monkeypatch, tmp_path) -> None:
        def unavailable(namespace):
            raise ProviderError("WMI is not available on this platform")

        monkeypatch.setattr(explorer_module, "WMIQueryProvider", unavailable)

        assert cli.main(["--explore", "devices.txt"]) == cli.EXIT_FAILURE
        assert not (tmp_path / "devices.txt").exists()

    def test_partial_inventory_succeeds(self, monkeypatch, platform_info, cpu_bag, capsys) -> None:
        provider = FakeQueryProvider({"Win32_Processor": [cpu_bag]}, failing={"Win32_DiskDrive"})
        monkeypatch.setattr(explorer_module, "WMIQueryProvider", lambda namespace: provider)
        monkeypatch.setattr(explorer_module, "collect_platform_info", lambda include_environment: platform_info)

        assert cli.main(["-e", "devices.txt"]) == cli.EXIT_OK
        assert "Disk Drives: access denied" in capsys.readouterr().out


class TestListCounters:
    """Tests for -l/--list-counters."""

    def test_lists_categories(self, fake_pdh, capsys) -> None:
        assert cli.main(["-l"]) == cli.EXIT_OK

        out = capsys.readouterr().out
        assert "Category name: Memory\n" in out
        assert "Category name: Processor\n" in out
        assert fake_pdh.closed is True

    def test_lists_category_counters(self, fake_pdh, capsys) -> None:
        assert cli.main(["--list-counters", "Processor"]) == cli.EXIT_OK

        out = capsys.readouterr().out
        assert "Category Name: Processor\n" in out
        assert "  Instance Name: _Total\n" in out
        assert out.count("     Counter Name: % Idle Time\n") == 2

    def test_unknown_category(self, fake_pdh, capsys) -> None:
        assert cli.main(["-l", "Bogus"]) == cli.EXIT_FAILURE
        assert "Unknown counter category Bogus" in capsys.readouterr().err


def test_generate_config(tmp_path) -> None:
    path = tmp_path / "conf" / "sysinfo.yaml"

    assert cli.main(["--generate-config", "-c", str(path)]) == cli.EXIT_OK

    data = yaml.safe_load(path.read_text())
    assert data["report"]["output_filename"] == "devices.txt"
    assert data["wmi"]["namespace"] == "root\\cimv2"
