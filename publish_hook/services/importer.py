"""b3scale recordings import API service."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from ..config import ImportAPIConfig
from ..models.result import ImportErrorKind, ImportResult

CONTENT_TYPE = "application/xml"

# Longest server error text kept in a result
MAX_ERROR_LENGTH = 500


class RecordingsImportService:
    """Uploads a published recording's metadata.xml to the import API.

    One call to upload_metadata() issues at most one POST request. There
    are no retries; failures come back as an ImportResult carrying an
    ImportErrorKind instead of being raised.
    """

    def __init__(
        self,
        config: ImportAPIConfig,
        logger: logging.Logger,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._logger = logger
        self._session = session

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.access_token}",
            "Content-Type": CONTENT_TYPE,
        }

    def _post(self, body: bytes) -> requests.Response:
        post = self._session.post if self._session is not None else requests.post
        return post(
            self._config.import_url,
            data=body,
            headers=self._headers(),
            timeout=self._config.timeout,
        )

    def upload_metadata(self, meeting_id: str, metadata_file: Path) -> ImportResult:
        """Read metadata_file and POST its bytes to the import endpoint.

        Args:
            meeting_id: Recording id, used for logging and the result
            metadata_file: Path to the recording's metadata.xml

        Returns:
            ImportResult with the HTTP status, or the failure kind
        """
        url = self._config.import_url
        result = ImportResult(meeting_id=meeting_id, url=url)

        try:
            body = Path(metadata_file).read_bytes()
        except OSError as e:
            return self._fail(
                result,
                ImportErrorKind.METADATA_MISSING,
                f"Could not read {metadata_file}: {e}",
            )

        self._logger.info(
            f"Importing recording {meeting_id} ({len(body)} bytes) to {url}"
        )

        try:
            response = self._post(body)
        except requests.exceptions.SSLError as e:
            return self._fail(result, ImportErrorKind.TLS, str(e))
        except requests.exceptions.Timeout as e:
            return self._fail(result, ImportErrorKind.TIMEOUT, str(e))
        except requests.exceptions.ConnectionError as e:
            return self._fail(result, ImportErrorKind.CONNECTION, str(e))
        except requests.RequestException as e:
            return self._fail(result, ImportErrorKind.REQUEST, str(e))

        result.status_code = response.status_code
        if not response.ok:
            return self._fail(
                result,
                ImportErrorKind.HTTP_STATUS,
                f"HTTP {response.status_code}: {self._error_text(response)}",
            )

        result.record_id = self._record_id(response)
        self._logger.info(
            f"Imported recording {meeting_id}: HTTP {response.status_code}"
            + (f", RecordID {result.record_id}" if result.record_id else "")
        )
        return result

    def _fail(
        self, result: ImportResult, kind: ImportErrorKind, message: str
    ) -> ImportResult:
        result.error_kind = kind
        result.error = message
        self._logger.error(
            f"Import of recording {result.meeting_id} failed ({kind.name}): {message}"
        )
        return result

    def _record_id(self, response: requests.Response) -> str | None:
        """Extract RecordID from the imported recording echoed back as JSON."""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict):
            record_id = data.get("RecordID")
            if record_id:
                return str(record_id)
        return None

    def _error_text(self, response: requests.Response) -> str:
        """Pull a readable error out of a failed response.

        The API answers errors with a JSON object; anything else is
        reported as raw text.
        """
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            text = data.get("message") or data.get("error") or str(data)
        else:
            text = response.text or response.reason or ""
        text = " ".join(str(text).split())
        return text[:MAX_ERROR_LENGTH]
