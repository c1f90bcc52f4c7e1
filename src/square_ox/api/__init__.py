"""Camada de API: endpoints, conectores HTTP, builders, validadores e recursos."""
