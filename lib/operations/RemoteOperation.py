"""
lib/operations/RemoteOperation.py

Purpose:
Defines the base class for remote operations. Each RemoteOperation is a Functor which performs a single request-level action against the server (e.g. move, rename).

Place in Architecture:
The foundation for all operations in this package. Callers (and whatever retry or authentication layer wraps them) only ever see Execute() and its RemoteOperationResult.
This is also where exceptions stop: anything raised while the operation runs is logged and turned into a result.

Interface:

	Inherits from eons.Functor.
	Args: client (required), read_timeout and connection_timeout (optional, milliseconds; defaults set by child classes).
	Execute(client): Runs the operation synchronously and returns its result. Never raises.
	ExecuteAsync(client, listener=None): Runs Execute on a background thread and hands the result to listener(operation, result).
	Run(client): Implemented by child classes.
	Describe(): Implemented by child classes; prefixes every log line.

TODOs/FIXMEs:
None.
"""

import eons
import logging
import threading

from ..Utils import ParseTimeout
from .RemoteOperationResult import RemoteOperationResult, ResultCode


# All RemoteOperations should be:
# - Self-contained: Every invocation builds its own requests and releases its own connections.
# - Non-throwing: Every failure ends up in the RemoteOperationResult returned by Execute.
#
# The only state shared between operations is the connection pool of the client they are given.
class RemoteOperation(eons.Functor):
	def __init__(this, name=eons.INVALID_NAME(), read_timeout=None, connection_timeout=None):
		super().__init__(name)

		this.arg.kw.required.append("client")

		# Child classes replace these with their own defaults.
		this.arg.kw.optional["read_timeout"] = None
		this.arg.kw.optional["connection_timeout"] = None

		# Timeouts given to the constructor win over the defaults.
		this.overrides = {}
		if (read_timeout is not None):
			this.overrides["read_timeout"] = read_timeout
		if (connection_timeout is not None):
			this.overrides["connection_timeout"] = connection_timeout

		this.outcome = None

	# ValidateArgs is automatically called before Function, per eons.Functor.
	def ValidateArgs(this):
		super().ValidateArgs()

		if (this.client is None):
			raise eons.MissingArgumentError(f"error: {this.name} needs a client")

		try:
			this.read_timeout = ParseTimeout(this.read_timeout)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --read-timeout {this.read_timeout} is not a valid timeout")

		try:
			this.connection_timeout = ParseTimeout(this.connection_timeout)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --connection-timeout {this.connection_timeout} is not a valid timeout")

	def Function(this):
		this.outcome = this.Run(this.client)
		logging.info(f"{this.Describe()}: {this.outcome.GetLogMessage()}")
		return this.outcome

	def Execute(this, client):
		this.outcome = None
		try:
			this(client=client, **this.overrides)
		except Exception as e:
			this.outcome = RemoteOperationResult.FromException(e)
			logging.error(f"{this.Describe()}: {this.outcome.GetLogMessage()}")

		# Function never ran.
		if (this.outcome is None):
			this.outcome = RemoteOperationResult.FromCode(ResultCode.UNKNOWN_ERROR)
		return this.outcome

	def ExecuteAsync(this, client, listener=None):
		def Worker():
			result = this.Execute(client)
			if (listener is not None):
				listener(this, result)

		thread = threading.Thread(target=Worker, name=str(this.name), daemon=True)
		thread.start()
		return thread

	# Override this in your child class.
	def Run(this, client):
		raise NotImplementedError(f"{this.name} does not implement Run")

	# Override this in your child class.
	def Describe(this):
		return str(this.name)
