"""
Integration tests for webhook verification.

Tests the WebhookVerifier application service.
"""

import pytest

from credcore.application.webhooks import WebhookVerifier
from credcore.core.errors import ConfigurationError, MalformedSignatureError
from credcore.infrastructure.crypto.signatures import SignatureService


class TestWebhookVerifier:
    """Tests for WebhookVerifier."""

    def test_sign_and_verify(self, webhook_verifier: WebhookVerifier):
        """Test verifier accepts its own signatures."""
        body = b'{"event":"order.paid"}'
        assert webhook_verifier.verify(body, webhook_verifier.sign(body)) is True

    def test_header_whitespace_ignored(self, webhook_verifier: WebhookVerifier):
        """Test surrounding whitespace in the header is tolerated."""
        body = b"{}"
        assert webhook_verifier.verify(body, f" {webhook_verifier.sign(body)}\n") is True

    def test_missing_signature(self, webhook_verifier: WebhookVerifier):
        """Test a missing header is malformed input, not a mismatch."""
        with pytest.raises(MalformedSignatureError):
            webhook_verifier.verify(b"{}", None)

    def test_malformed_signature(self, webhook_verifier: WebhookVerifier):
        """Test non-hex header raises."""
        with pytest.raises(MalformedSignatureError):
            webhook_verifier.verify(b"{}", "not-a-signature")

    def test_payment_signature(self, webhook_secret: bytes, signer: SignatureService):
        """Test gateway signature over order and payment ids."""
        verifier = WebhookVerifier(secret=webhook_secret)
        signature = signer.sign(b"order_Nx81|pay_Q2c9", webhook_secret)

        assert verifier.verify_payment("order_Nx81", "pay_Q2c9", signature) is True
        assert verifier.verify_payment("order_Nx81", "pay_Q2c8", signature) is False

    def test_secret_from_settings(self, monkeypatch: pytest.MonkeyPatch, signer: SignatureService):
        """Test verifier falls back to the configured secret."""
        monkeypatch.setenv("CREDCORE_WEBHOOK_SECRET", "whsec_from_env")
        verifier = WebhookVerifier()
        assert verifier.verify(b"body", signer.sign(b"body", b"whsec_from_env")) is True

    def test_missing_secret(self, monkeypatch: pytest.MonkeyPatch):
        """Test verifier refuses to run without a secret."""
        monkeypatch.delenv("CREDCORE_WEBHOOK_SECRET", raising=False)
        with pytest.raises(ConfigurationError):
            WebhookVerifier(secret=b"")
