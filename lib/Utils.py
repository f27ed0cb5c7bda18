from urllib.parse import quote

from .RemotePath import PATH_SEPARATOR

# Characters the server refuses in file and folder names.
INVALID_PATH_CHARACTERS = ('\\', '<', '>', ':', '"', '|', '?', '*')


def IsValidPath(path):
	return not any(c in path for c in INVALID_PATH_CHARACTERS)


# Percent-encode a remote path, keeping the separators intact.
def EncodePath(path):
	return quote(path, safe=PATH_SEPARATOR)


def ParseTimeout(timeout):
	"""
	Return `timeout` as a positive number of milliseconds.
	Strings are accepted so that values may come straight from configuration.
	"""
	try:
		timeout = int(timeout)
		if timeout <= 0:
			raise ValueError()
	except (TypeError, ValueError, OverflowError):
		raise ValueError(f"error: {timeout!r} is not a valid timeout")
	return timeout


def MillisecondsToSeconds(timeout):
	if timeout is None:
		return None
	return timeout / 1000.0
