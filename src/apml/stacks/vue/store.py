"""Pinia store holding model collections and computed values."""

from ...core import ir
from ..base import Generator, GeneratorResult
from ..base.utils import indent, lower_first
from .expressions import computed_body

STORE_PATH = "src/stores/app.ts"


def collection_name(model_name: str) -> str:
    """Post -> posts, Status -> status"""
    camel = lower_first(model_name)
    return camel if camel.endswith("s") else f"{camel}s"


class StoreGenerator(Generator):
    """Generates ``src/stores/app.ts`` when there are models or computed values."""

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        models = self.document.data
        computed = self.document.computed
        if not models and not computed:
            return result

        lines = ["import { defineStore } from 'pinia';", "import { ref, computed } from 'vue';"]
        if models:
            names = ", ".join(m.name for m in models)
            lines.append(f"import type {{ {names} }} from '../types/models';")

        lines += [
            "",
            "/**",
            " * Generated Pinia store from APML data and computed values",
            " * DO NOT EDIT - This file is auto-generated",
            " */",
            "",
            "export const useAppStore = defineStore('app', () => {",
            "  // State",
        ]
        for model in models:
            lines.append(f"  const {collection_name(model.name)} = ref<{model.name}[]>([]);")

        lines += ["", "  // Computed properties"]
        for value in computed:
            if not value.source:
                result.add_warning(
                    f"Computed value '{value.name}' has no expression; it will be null"
                )
            lines.extend(self._computed_lines(value))

        lines += ["  return {"]
        lines += [f"    {collection_name(m.name)}," for m in models]
        lines += [f"    {value.name}," for value in computed]
        lines += ["  };", "});"]

        result.add_file(STORE_PATH, "\n".join(lines))
        return result

    def _computed_lines(self, value: ir.ComputedValue) -> list[str]:
        body = indent(computed_body(value.source), 4)
        return [f"  const {value.name} = computed(() => {{", body, "  });", ""]
