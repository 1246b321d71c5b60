"""
handlers/ - Presentation Layer
================================
gRPC servicers. Each handler unpacks a request message, delegates to the
appropriate Service, and packs the result into a response message.
No business logic lives here.
"""
