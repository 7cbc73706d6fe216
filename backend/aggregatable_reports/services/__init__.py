"""Services: orchestrate core calls for the HTTP shell and attach logging context."""
