# quizrunner/bank/loader.py
from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import requests

from quizrunner.bank.parser import parse_question_bank
from quizrunner.domain.errors import NotFoundError
from quizrunner.domain.models import Question

log = logging.getLogger(__name__)

RESOURCE_SUFFIX = ".txt"


def _get_env(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip()


@dataclass(frozen=True)
class LoaderConfig:
    content_root: str = "public"
    timeout_sec: Optional[float] = None
    encoding: str = "utf-8"

    @staticmethod
    def from_env() -> "LoaderConfig":
        timeout = _get_env("QUIZ_HTTP_TIMEOUT")
        return LoaderConfig(
            content_root=_get_env("QUIZ_CONTENT_ROOT", "public") or "public",
            timeout_sec=float(timeout) if timeout else None,
            encoding=_get_env("QUIZ_ENCODING", "utf-8") or "utf-8",
        )

    @property
    def is_remote(self) -> bool:
        return self.content_root.startswith(("http://", "https://"))


def resource_name(quiz_id: str) -> str:
    return f"{quiz_id}{RESOURCE_SUFFIX}"


class QuizLoader:
    def __init__(self, config: LoaderConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._http = session

    async def load(self, quiz_id: str) -> List[Question]:
        """
        Retrieves "<quiz_id>.txt" from the content root and parses it.
        Raises NotFoundError or FormatError.
        """
        log.info("Loading quiz %s from %s", quiz_id, self.config.content_root)
        text = await asyncio.to_thread(self._fetch_text, quiz_id)
        questions = parse_question_bank(text)
        log.info("Quiz %s loaded: %d question(s)", quiz_id, len(questions))
        return questions

    def available_quizzes(self) -> List[str]:
        if self.config.is_remote:
            return []
        root = Path(self.config.content_root)
        if not root.is_dir():
            return []
        return sorted(p.stem for p in root.glob(f"*{RESOURCE_SUFFIX}") if p.is_file())

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def _fetch_text(self, quiz_id: str) -> str:
        resource = resource_name(quiz_id)
        if self.config.is_remote:
            return self._fetch_remote(quiz_id, resource)
        return self._fetch_local(quiz_id, resource)

    def _fetch_remote(self, quiz_id: str, resource: str) -> str:
        url = f"{self.config.content_root.rstrip('/')}/{resource}"
        try:
            if self._http is None:
                self._http = requests.Session()
            response = self._http.get(url, timeout=self.config.timeout_sec)
        except requests.exceptions.RequestException as e:
            log.error("Request for %s failed: %s", url, e)
            raise NotFoundError(quiz_id, resource) from e

        if not response.ok:
            log.error("Request for %s returned %s", url, response.status_code)
            raise NotFoundError(quiz_id, resource)

        # text/plain without charset comes back as latin-1 from requests
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = self.config.encoding
        return response.text

    def _fetch_local(self, quiz_id: str, resource: str) -> str:
        path = Path(self.config.content_root) / resource
        try:
            return path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            log.error("Cannot read %s: %s", path, e)
            raise NotFoundError(quiz_id, resource) from e
