from unittest.mock import Mock


class FakeResponse(object):
	def __init__(this, status, headers=None):
		this.status = status
		this.headers = dict(headers or {})
		this.reads = 0
		this.closes = 0

	def read(this, size=None):
		this.reads += 1
		return b""

	def close(this):
		this.closes += 1


# A DavConnection stand-in answering every method with `status`.
# Responses and executed methods are kept on the client for inspection.
def MakeClient(exists=False, status=201, headers=None):
	client = Mock()
	client.url.side_effect = lambda path: "http://example.com/dav" + path
	client.exists_file.return_value = exists
	client.responses = []
	client.methods = []

	def ExecuteMethod(method, read_timeout=None, connection_timeout=None):
		response = FakeResponse(status, headers)
		client.responses.append(response)
		client.methods.append(method)
		method.response = response
		return status

	client.execute_method.side_effect = ExecuteMethod
	return client
