"""
lib/operations/RemoteOperationResult.py

Purpose:
Defines the outcome of a remote operation: a ResultCode plus whatever the server (or the failure) told us.

Place in Architecture:
Every RemoteOperation returns exactly one RemoteOperationResult from Execute(); operations never raise to their callers.
Results are frozen once built.

Interface:

	ResultCode: Enum of every outcome an operation can report.
	RemoteOperationResult:
		FromCode(code): Local outcome; no request was made.
		FromResponse(success, http_code, headers): Outcome of an HTTP exchange.
		FromException(exception): Outcome of a failed exchange.
		IsSuccess(), GetHeader(name), GetLogMessage().

TODOs/FIXMEs:
None.
"""

import eons
import socket
import ssl
import http.client
from dataclasses import dataclass
from enum import Enum
from urllib.error import URLError


class ResultCode(Enum):
	OK = 0
	UNHANDLED_HTTP_CODE = 1
	UNAUTHORIZED = 2
	FORBIDDEN = 3
	FILE_NOT_FOUND = 4
	CONFLICT = 5
	INSTANCE_NOT_CONFIGURED = 6
	QUOTA_EXCEEDED = 7
	UNKNOWN_ERROR = 8
	WRONG_CONNECTION = 9
	TIMEOUT = 10
	INCORRECT_ADDRESS = 11
	HOST_NOT_AVAILABLE = 12
	SSL_ERROR = 13
	INVALID_CHARACTER_IN_NAME = 14
	INVALID_OVERWRITE = 15
	INVALID_DESTINATION_FILE = 16

	def __str__(self):
		return self.name


HTTP_CODES = {
	401: ResultCode.UNAUTHORIZED,
	403: ResultCode.FORBIDDEN,
	404: ResultCode.FILE_NOT_FOUND,
	409: ResultCode.CONFLICT,
	500: ResultCode.INSTANCE_NOT_CONFIGURED,
	507: ResultCode.QUOTA_EXCEEDED,
}

EXCEPTION_LABELS = {
	ResultCode.TIMEOUT: "Socket timeout exception",
	ResultCode.HOST_NOT_AVAILABLE: "Unknown host exception",
	ResultCode.SSL_ERROR: "SSL exception",
	ResultCode.INCORRECT_ADDRESS: "Malformed URL exception",
	ResultCode.WRONG_CONNECTION: "Socket exception",
}


def CodeForStatus(http_code):
	return HTTP_CODES.get(http_code, ResultCode.UNHANDLED_HTTP_CODE)


def CodeForException(exception):
	# urllib wraps socket errors raised while sending.
	if isinstance(exception, URLError) and isinstance(exception.reason, BaseException):
		exception = exception.reason

	# Bad arguments are a caller error, not a transport one.
	if isinstance(exception, eons.MissingArgumentError):
		return ResultCode.UNKNOWN_ERROR
	if isinstance(exception, socket.timeout):
		return ResultCode.TIMEOUT
	if isinstance(exception, ssl.SSLError):
		return ResultCode.SSL_ERROR
	if isinstance(exception, (socket.gaierror, ConnectionRefusedError)):
		return ResultCode.HOST_NOT_AVAILABLE
	if isinstance(exception, (URLError, http.client.InvalidURL, ValueError)):
		return ResultCode.INCORRECT_ADDRESS
	if isinstance(exception, (http.client.HTTPException, OSError)):
		return ResultCode.WRONG_CONNECTION
	return ResultCode.UNKNOWN_ERROR


@dataclass(frozen=True)
class RemoteOperationResult:
	code: ResultCode
	success: bool
	http_code: int = -1
	headers: tuple = ()
	exception: BaseException = None

	@classmethod
	def FromCode(cls, code):
		return cls(code, code is ResultCode.OK)

	@classmethod
	def FromResponse(cls, success, http_code, headers=()):
		code = ResultCode.OK if success else CodeForStatus(http_code)
		return cls(code, bool(success), http_code, tuple(headers))

	@classmethod
	def FromException(cls, exception):
		return cls(CodeForException(exception), False, exception=exception)

	def IsSuccess(this):
		return this.success

	def GetHeader(this, name):
		name = name.lower()
		for key, value in this.headers:
			if key.lower() == name:
				return value
		return None

	def GetLogMessage(this):
		if this.exception is not None:
			label = EXCEPTION_LABELS.get(this.code, "Unexpected exception")
			return f"{label}: {this.exception}"

		outcome = "success" if this.success else "fail"
		if this.http_code > 0:
			return f"Operation finished with HTTP status code {this.http_code} ({outcome})"
		return f"Operation finished with result {this.code} ({outcome})"
