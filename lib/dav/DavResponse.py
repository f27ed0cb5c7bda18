"""
lib/dav/DavResponse.py

Purpose:
Wraps the HTTP response of a WebDAV request and the connection slot it occupies.

Place in Architecture:
Created by DavConnection for every request. Closing the response returns its slot to the connection's pool.
Error statuses (4xx, 5xx) are wrapped exactly like successful ones; interpreting them is up to the operation.

Interface:

	__init__(connection, opener, req, timeout): Sends the request and waits for the response headers.
	status, headers: Status code and headers of the response.
	read(size=None): Reads data from the response.
	close(): Closes the response and notifies the connection.

	TimedHTTPHandler / TimedHTTPSHandler: urllib handlers applying a separate read timeout once connected.

TODOs/FIXMEs:
None.
"""

import http.client
from urllib.error import HTTPError
from urllib.request import HTTPHandler, HTTPSHandler


# urllib only knows a single timeout, which it uses to connect and for every
# blocking read. The connections below take the connect timeout from urllib as
# usual and switch the socket over to the read timeout as soon as they are up.
class TimedHTTPConnection(http.client.HTTPConnection):
	def __init__(this, *args, read_timeout=None, **kwargs):
		super().__init__(*args, **kwargs)
		this.read_timeout = read_timeout

	def connect(this):
		super().connect()
		if this.read_timeout is not None:
			this.sock.settimeout(this.read_timeout)


class TimedHTTPSConnection(http.client.HTTPSConnection):
	def __init__(this, *args, read_timeout=None, **kwargs):
		super().__init__(*args, **kwargs)
		this.read_timeout = read_timeout

	def connect(this):
		super().connect()
		if this.read_timeout is not None:
			this.sock.settimeout(this.read_timeout)


class TimedHTTPHandler(HTTPHandler):
	def __init__(this, read_timeout=None):
		super().__init__()
		this.read_timeout = read_timeout

	def http_open(this, req):
		return this.do_open(TimedHTTPConnection, req, read_timeout=this.read_timeout)


class TimedHTTPSHandler(HTTPSHandler):
	def __init__(this, read_timeout=None, context=None):
		super().__init__(context=context)
		this.read_timeout = read_timeout

	def https_open(this, req):
		return this.do_open(TimedHTTPSConnection, req, context=this._context, read_timeout=this.read_timeout)


class DavResponse(object):
	def __init__(this, connection, opener, req, timeout):
		this.connection = connection

		try:
			this.response = opener.open(req, timeout=timeout)
		except HTTPError as err:
			# Still a complete response; the status is the answer.
			this.response = err

		this.status = this.response.getcode()
		this.headers = this.response.headers

	def read(this, size=None):
		if size is None:
			return this.response.read()
		return this.response.read(size)

	def close(this):
		try:
			this.response.close()
		finally:
			this.connection._release_response(this)
