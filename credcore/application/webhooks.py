"""
Webhook and payment-callback signature verification.

Verifies raw request bodies against an HMAC-SHA256 signature header,
and payment gateway callbacks signed over ``"<order_id>|<payment_id>"``.
"""

from credcore.core.config import get_settings
from credcore.core.errors import ConfigurationError, MalformedSignatureError
from credcore.core.logging import get_logger
from credcore.domain.services import SensitiveDataMasker
from credcore.infrastructure.crypto.signatures import SignatureService

logger = get_logger(__name__)


class WebhookVerifier:
    """
    Checks authenticity of inbound webhook payloads.

    Example:
        verifier = WebhookVerifier(secret=b"whsec_...")
        if not verifier.verify(raw_body, request.headers["X-Webhook-Signature"]):
            raise SignatureMismatchError()
    """

    def __init__(
        self,
        secret: bytes | str | None = None,
        signer: SignatureService | None = None,
    ):
        """
        Initialize webhook verifier.

        Args:
            secret: Shared webhook secret. Falls back to the configured
                ``webhook_secret``.
            signer: Signature service.

        Raises:
            ConfigurationError: If no secret is given or configured.
        """
        if secret is None:
            secret = get_settings().webhook_secret_bytes
        if not secret:
            logger.error("webhook_secret_missing")
            raise ConfigurationError("Payment gateway configuration error")

        self._secret = secret
        self._signer = signer or SignatureService()
        self._masker = SensitiveDataMasker.from_settings()

    def sign(self, raw_body: bytes | str) -> str:
        """Sign an outbound payload."""
        return self._signer.sign(raw_body, self._secret)

    def verify(self, raw_body: bytes | str, signature: str | None) -> bool:
        """
        Verify a raw webhook body.

        Args:
            raw_body: Exact bytes received.
            signature: Signature header value.

        Returns:
            bool: True only if the signature matches.

        Raises:
            MalformedSignatureError: If the signature is missing or not hex.
        """
        if signature is None:
            logger.warning("webhook_signature_missing")
            raise MalformedSignatureError("Signature header is missing")

        try:
            valid = self._signer.verify(raw_body, signature.strip(), self._secret)
        except MalformedSignatureError:
            logger.warning(
                "webhook_signature_malformed",
                signature=self._masker.mask(signature),
            )
            raise

        if valid:
            logger.info("webhook_signature_verified")
        else:
            logger.warning(
                "webhook_signature_rejected",
                signature=self._masker.mask(signature),
            )
        return valid

    def verify_payment(self, order_id: str, payment_id: str, signature: str | None) -> bool:
        """
        Verify a payment gateway callback signature.

        The gateway signs ``"<order_id>|<payment_id>"`` with the merchant
        secret.

        Args:
            order_id: Gateway order identifier.
            payment_id: Gateway payment identifier.
            signature: Signature sent by the gateway.

        Returns:
            bool: True only if the signature matches.
        """
        return self.verify(f"{order_id}|{payment_id}", signature)
