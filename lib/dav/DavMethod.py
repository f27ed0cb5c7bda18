"""
lib/dav/DavMethod.py

Purpose:
Describes a single WebDAV request: its method name, target uri, headers, body and the statuses that count as success.

Place in Architecture:
Built by remote operations and handed to DavConnection.execute_method(). Once executed, the method holds the response until release_connection() is called.
The method, not the caller, owns the connection it was executed on.

Interface:

	DavMethod(uri, headers=None, body=None): Base class.
	is_success(status): Success predicate for the method.
	get_response_body(): Reads (exhausts) the response.
	get_response_headers(): Returns the response headers as (name, value) pairs.
	release_connection(): Closes the response and hands the connection back to its pool. Safe to call more than once.

	MoveMethod(uri, destination): MOVE with a Destination header. 201 and 204 are success.
	PropFindMethod(uri, depth=0): PROPFIND asking only for the resource type. 200 and 207 are success.

TODOs/FIXMEs:
None.
"""

class DavMethod(object):
	name = None

	def __init__(this, uri, headers=None, body=None):
		assert isinstance(uri, str), uri

		this.uri = uri
		this.headers = dict(headers or {})
		this.body = body
		this.response = None

	def is_success(this, status):
		return 200 <= status < 300

	def get_response_body(this):
		if this.response is None:
			return b""
		return this.response.read()

	def get_response_headers(this):
		if this.response is None:
			return []
		return list(this.response.headers.items())

	def release_connection(this):
		response = this.response
		this.response = None
		if response is not None:
			response.close()


class MoveMethod(DavMethod):
	name = "MOVE"

	def __init__(this, uri, destination):
		super().__init__(uri, headers={'Destination': destination})

	def is_success(this, status):
		return status == 201 or status == 204


PROPFIND_RESOURCETYPE = (
	b'<?xml version="1.0" encoding="utf-8"?>'
	b'<d:propfind xmlns:d="DAV:"><d:prop><d:resourcetype/></d:prop></d:propfind>'
)

class PropFindMethod(DavMethod):
	name = "PROPFIND"

	def __init__(this, uri, depth=0):
		super().__init__(
			uri,
			headers={
				'Depth': str(depth),
				'Content-Type': 'application/xml; charset=utf-8',
			},
			body=PROPFIND_RESOURCETYPE
		)

	def is_success(this, status):
		return status == 200 or status == 207
