"""Demo consumers of the Cayley algebras."""
