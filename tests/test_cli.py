import pytest
from selenium.common.exceptions import WebDriverException

from conftest import FakeHttp, FakeResponse
from elpais_opinion import browser, cli, config
from elpais_opinion.errors import NoArticlesError


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.limit == config.NUM_ARTICLES
    assert args.target == "en"
    assert not args.remote and not args.matrix and args.dump_html is None


def test_dump_html_defaults_to_opinion_url():
    assert cli.build_parser().parse_args(["--dump-html"]).dump_html == config.OPINION_URL


def test_target_from_args():
    args = cli.build_parser().parse_args(
        ["--remote", "--browser", "Safari", "--device", "iPhone 14", "--os-version", "16", "--real-mobile"]
    )
    target = cli.target_from_args(args)
    assert target.browser_name == "Safari"
    assert target.device_name == "iPhone 14"
    assert target.real_mobile is True


def test_missing_credentials_is_a_configuration_error(monkeypatch, capsys):
    monkeypatch.delenv(config.BS_USERNAME_VAR, raising=False)
    monkeypatch.delenv(config.BS_ACCESS_KEY_VAR, raising=False)
    monkeypatch.setattr(browser.webdriver, "Remote", lambda *a, **kw: pytest.fail("no driver expected"))

    assert cli.main(["--remote"]) == cli.EXIT_CONFIG
    assert "BROWSERSTACK_USERNAME and BROWSERSTACK_ACCESS_KEY" in capsys.readouterr().err


def test_matrix_checks_credentials_first(monkeypatch):
    monkeypatch.delenv(config.BS_USERNAME_VAR, raising=False)
    monkeypatch.delenv(config.BS_ACCESS_KEY_VAR, raising=False)
    assert cli.main(["--matrix"]) == cli.EXIT_CONFIG


def test_non_positive_limit_rejected():
    assert cli.main(["--limit", "0"]) == cli.EXIT_CONFIG


def test_run_failure_exit_code(monkeypatch):
    class Session:
        label = "local"

    monkeypatch.setattr(cli.BrowserSession, "local", classmethod(lambda cls, headless=True: Session()))

    def failing_run(*args, **kwargs):
        raise NoArticlesError("Zero articles scraped!")

    monkeypatch.setattr(cli, "run_pipeline", failing_run)
    assert cli.main([]) == cli.EXIT_RUN_FAILED


def test_dump_html_prints_page(capsys):
    http = FakeHttp(get=lambda url, **kw: FakeResponse(text="<html>opinion</html>"))
    assert cli.dump_html(http, config.OPINION_URL) == cli.EXIT_OK
    assert "<html>opinion</html>" in capsys.readouterr().out


def test_dump_html_reports_http_errors(capsys):
    http = FakeHttp(get=lambda url, **kw: FakeResponse(status_code=500, text=""))
    assert cli.dump_html(http, config.OPINION_URL) == cli.EXIT_RUN_FAILED
    assert "Request failed: 500" in capsys.readouterr().err


def test_browser_startup_failure_exit_code(monkeypatch, capsys):
    def no_chrome(cls, headless=True):
        raise WebDriverException("chromedriver unavailable")

    monkeypatch.setattr(cli.BrowserSession, "local", classmethod(no_chrome))

    assert cli.main([]) == cli.EXIT_RUN_FAILED
    assert "chromedriver unavailable" in capsys.readouterr().err
