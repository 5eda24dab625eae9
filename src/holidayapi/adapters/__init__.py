"""I/O adapters: HTTP dispatch and the endpoint request builders."""
