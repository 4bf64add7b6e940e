"""
Concrete values behind the registry symbols examples import.

  react      — REACT, the element framework
  ui         — SEMANTIC_UI_REACT, the component kit
  wireframe  — WIREFRAME, placeholder page content
  lodash     — LODASH, utility belt over pydash
  fake       — FAKER, seeded fake data over Faker
"""
