"""HTTP controllers exposing the session store."""
