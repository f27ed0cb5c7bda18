"""
lib/dav/DavConnection.py

Purpose:
Provides an API client for a WebDAV server. It builds the urls of remote paths under the server's WebDAV endpoint, executes DavMethods and bounds the number of connections in use at once.

Place in Architecture:
The interface between remote operations (e.g. MoveRemoteFile) and the server. Operations never open sockets themselves; they hand a DavMethod to execute_method() and release it when done.

Interface:

	__init__(base_url, timeout, max_connections=10, credentials=None, dav_path=WEBDAV_PATH): Initializes the connection parameters and the semaphore bounding concurrent connections.
	Internal methods: _get_response(), _release_response(), _get_request(), _build_opener().
	Public members:
		webdav_url: Absolute url of the WebDAV endpoint.
		url(path): Absolute url of a remote path (percent-encoded).
		execute_method(method, read_timeout=None, connection_timeout=None): Sends the method and returns the HTTP status. The response is attached to the method.
		exists_file(path): Whether a resource exists at path (PROPFIND, Depth 0).

TODOs/FIXMEs:
None.
"""

import base64
import logging
import threading
from urllib.request import Request, build_opener

from ..RemotePath import PATH_SEPARATOR
from ..Utils import EncodePath, ParseTimeout, MillisecondsToSeconds
from .DavMethod import PropFindMethod
from .DavResponse import DavResponse, TimedHTTPHandler, TimedHTTPSHandler

WEBDAV_PATH = "/remote.php/webdav"
DEFAULT_TIMEOUT = 30000 # ms
DEFAULT_MAX_CONNECTIONS = 10

class DavConnection(object):
	def __init__(this, base_url, timeout=DEFAULT_TIMEOUT, max_connections=DEFAULT_MAX_CONNECTIONS, credentials=None, dav_path=WEBDAV_PATH):
		assert isinstance(base_url, str)
		assert isinstance(dav_path, str)

		this.base_url = base_url.rstrip(PATH_SEPARATOR)
		this.webdav_url = this.base_url + dav_path.rstrip(PATH_SEPARATOR)

		this.credentials = credentials

		this.connections = []
		this.lock = threading.Lock()

		this.max_connections = max(1, int(max_connections))
		this.semaphore = threading.Semaphore(this.max_connections)
		this.timeout = ParseTimeout(timeout)

	def _get_response(this, req, read_timeout, connection_timeout):
		this.semaphore.acquire()
		try:
			response = DavResponse(this, this._build_opener(read_timeout), req, connection_timeout)
			with this.lock:
				this.connections.append(response)
				return response
		except Exception:
			this.semaphore.release()
			raise

	# Only responses still tracked give their slot back, so closing twice is harmless.
	def _release_response(this, response):
		with this.lock:
			if response in this.connections:
				this.semaphore.release()
				this.connections.remove(response)

	def _build_opener(this, read_timeout):
		return build_opener(
			TimedHTTPHandler(read_timeout=read_timeout),
			TimedHTTPSHandler(read_timeout=read_timeout)
		)

	def _get_request(this, method):
		headers = {'Accept': '*/*'}
		if this.credentials is not None:
			user, password = this.credentials
			token = base64.b64encode(f"{user}:{password}".encode('utf-8')).decode('ascii')
			headers['Authorization'] = 'Basic ' + token
		headers.update(method.headers)

		return Request(method.uri, data=method.body, headers=headers, method=method.name)

	def url(this, path):
		assert isinstance(path, str), path
		return this.webdav_url + PATH_SEPARATOR + EncodePath(path).lstrip(PATH_SEPARATOR)

	def execute_method(this, method, read_timeout=None, connection_timeout=None):
		if read_timeout is None:
			read_timeout = this.timeout
		if connection_timeout is None:
			connection_timeout = this.timeout

		logging.debug(f"{method.name} {method.uri}")
		response = this._get_response(
			this._get_request(method),
			MillisecondsToSeconds(read_timeout),
			MillisecondsToSeconds(connection_timeout)
		)
		method.response = response
		return response.status

	def exists_file(this, path):
		propfind = PropFindMethod(this.url(path))
		try:
			status = this.execute_method(propfind)
			propfind.get_response_body()
			return propfind.is_success(status)
		finally:
			propfind.release_connection()
