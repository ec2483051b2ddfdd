"""
Action nonces

A nonce is a signed, time-limited token bound to one action name and one
acting user. The action name is used as the signing salt, so a token issued
for one form never verifies for another.
"""

import logging
from collections.abc import Mapping
from typing import Any

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from coil.exceptions import NonceVerificationError

logger = logging.getLogger(__name__)


class NonceManager:
    def __init__(self, secret_key: str, lifetime: int = 60 * 60 * 24):
        self.secret_key = secret_key
        self.lifetime = lifetime

    def _serializer(self, action: str) -> URLSafeTimedSerializer:
        return URLSafeTimedSerializer(self.secret_key, salt=action)

    def create_nonce(self, action: str, actor_id: Any) -> str:
        """Issue a nonce for `action` on behalf of `actor_id`."""
        return self._serializer(action).dumps(actor_id)

    def verify_nonce(self, token: str, action: str, actor_id: Any) -> bool:
        """Return True when `token` was issued for `action` and `actor_id` and has not expired."""
        try:
            issued_for = self._serializer(action).loads(token, max_age=self.lifetime)
        except SignatureExpired:
            logger.info(f"Expired nonce submitted for action {action}")
            return False
        except BadSignature:
            return False
        return issued_for == actor_id

    def check_admin_referer(self, form: Mapping[str, Any], action: str, field_name: str, actor_id: Any) -> None:
        """
        Verify the nonce submitted under `field_name`.

        Raises:
            NonceVerificationError: the token is missing, forged or expired.
        """
        token = form.get(field_name)
        if not isinstance(token, str) or not self.verify_nonce(token, action, actor_id):
            logger.warning(f"Nonce verification failed for action {action} (actor_id={actor_id})")
            raise NonceVerificationError(action)
