"""
Tests for the CLI functionality
"""

from typer.testing import CliRunner
from unittest.mock import patch

from minimarket.cli import app
from minimarket.checkout import CheckoutResult
from minimarket.exceptions import ApplicationError


class TestCLI:
    """Test cases for CLI functionality"""

    def setup_method(self):
        """Set up test fixtures"""
        self.runner = CliRunner()
        self.env = {
            "MINIMARKET_CURRENCY": "",
            "MINIMARKET_DISCOUNT_KIND": "",
            "MINIMARKET_DISCOUNT_VALUE": "",
            "MINIMARKET_PAYMENT_METHOD": "",
            "MINIMARKET_CONFIRMED_LABEL": "",
        }

    def invoke(self, args, **env):
        return self.runner.invoke(app, args, env={**self.env, **env})

    def test_version_option(self):
        """Test --version option"""
        result = self.invoke(["--version"])
        assert result.exit_code == 0
        assert "minimarket version" in result.stdout

    def test_help_option(self):
        """Test --help option"""
        result = self.invoke(["--help"])
        assert result.exit_code == 0
        assert "--payment" in result.stdout
        assert "--strict" in result.stdout

    def test_no_arguments_runs_demo(self):
        """Test the demonstration run"""
        result = self.invoke([])
        assert result.exit_code == 0
        assert "Elma added to cart." in result.stdout
        assert "Cart total: 25 TL" in result.stdout
        assert "Discounted total: 22.5 TL" in result.stdout
        assert "Paid 22.5 TL by credit card." in result.stdout
        assert "Order status updated: Confirmed" in result.stdout
        assert "Checkout Summary" in result.stdout

    def test_quiet_skips_summary(self):
        """Test --quiet option"""
        result = self.invoke(["--quiet"])
        assert result.exit_code == 0
        assert "Checkout Summary" not in result.stdout
        assert "Order status updated: Confirmed" in result.stdout

    def test_options(self):
        """Test overriding every setting"""
        result = self.invoke([
            "--quiet",
            "--currency", "EUR",
            "--discount", "fixed",
            "--discount-value", "5",
            "--payment", "cash",
            "--status", "Onaylandı",
        ])
        assert result.exit_code == 0
        assert "Discounted total: 20 EUR" in result.stdout
        assert "Paid 20 EUR in cash." in result.stdout
        assert "Order status updated: Onaylandı" in result.stdout

    def test_environment_settings(self):
        """Test settings from the environment"""
        result = self.invoke(["--quiet"], MINIMARKET_PAYMENT_METHOD="transfer")
        assert result.exit_code == 0
        assert "by bank transfer." in result.stdout

    def test_option_overrides_environment(self):
        """Test that options take precedence over the environment"""
        result = self.invoke(["--quiet", "--currency", "USD"], MINIMARKET_CURRENCY="EUR")
        assert "Cart total: 25 USD" in result.stdout

    def test_failure_still_exits_zero(self):
        """Test that a failed checkout reports one line and exits 0"""
        result = self.invoke(["--quiet", "--payment", "crypto"])
        assert result.exit_code == 0
        assert "Error: Unknown payment method" in result.stdout
        assert "Order status updated" not in result.stdout

    def test_strict_failure_exits_one(self):
        """Test --strict option"""
        result = self.invoke(["--quiet", "--strict", "--discount-value", "150"])
        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_strict_success_exits_zero(self):
        """Test --strict on a successful run"""
        result = self.invoke(["--quiet", "--strict"])
        assert result.exit_code == 0

    def test_failure_summary(self):
        """Test that the summary shows the failure"""
        result = self.invoke(["--payment", "crypto"])
        assert result.exit_code == 0
        assert "Checkout Failed" in result.stdout

    def test_verbose_option(self):
        """Test --verbose option"""
        result = self.invoke(["--verbose", "--quiet"])
        assert result.exit_code == 0

    def test_sequence_uses_run_checkout(self):
        """Test that the CLI reports whatever run_checkout returns"""
        failed = CheckoutResult(error=ApplicationError("payment gateway down"))
        with patch("minimarket.cli.run_checkout", return_value=failed) as mock_run:
            result = self.invoke(["--quiet"])

        assert mock_run.called
        assert result.exit_code == 0
        assert "Error: payment gateway down" in result.stdout

    def test_failure_reports_error_once(self):
        """Test that the default run reports the failure on a single line"""
        result = self.invoke(["--payment", "crypto"])
        assert result.exit_code == 0
        assert result.stdout.count("Unknown payment method") == 1
        assert "Checkout Failed" in result.stdout

    def test_plain_summary(self):
        """Test --plain option"""
        result = self.invoke(["--plain"])
        assert result.exit_code == 0
        assert "Checkout summary:" in result.stdout
        assert "Order #1: Confirmed" in result.stdout
        assert "Checkout Summary" not in result.stdout

    def test_plain_summary_of_failure(self):
        """Test --plain on a failed checkout"""
        result = self.invoke(["--plain", "--payment", "crypto"])
        assert result.exit_code == 0
        assert "Checkout failed:" in result.stdout
        assert result.stdout.count("Unknown payment method") == 1
