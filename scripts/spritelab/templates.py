"""Source templates for the generated icon component.

Templates use str.format substitution; literal braces are doubled.
"""

HEADER = "// This file is generated by spritelab. Do not edit it by hand.\n"

# TypeScript (.tsx) component with the icon-name union type
TSX_TEMPLATE = """{header}
import {{ forwardRef, type SVGProps }} from "react";

export type IconName =
{icon_name_type};

export type {name}Props = Omit<SVGProps<SVGSVGElement>, "name"> & {{
  name: IconName;
}};

const SPRITE_URL = "{sprite_url}";
const CACHE_BUST_TOKEN = "{token}";

export const {name} = forwardRef<SVGSVGElement, {name}Props>(
  ({{ name, ...props }}, ref) => {{
    const [sprite, ...rest] = name.split("/");
    const icon = rest.join("/");
    return (
      <svg ref={{ref}} {{...props}}>
        <use href={{`${{SPRITE_URL}}/${{sprite}}.svg?v=${{CACHE_BUST_TOKEN}}#${{icon}}`}} />
      </svg>
    );
  }},
);

{name}.displayName = "{name}";
"""

# JavaScript (.jsx) component; prop types are appended when available
JSX_TEMPLATE = """{header}
import {{ forwardRef }} from "react";
{imports}
const SPRITE_URL = "{sprite_url}";
const CACHE_BUST_TOKEN = "{token}";

export const {name} = forwardRef(({{ name, ...props }}, ref) => {{
  const [sprite, ...rest] = name.split("/");
  const icon = rest.join("/");
  return (
    <svg ref={{ref}} {{...props}}>
      <use href={{`${{SPRITE_URL}}/${{sprite}}.svg?v=${{CACHE_BUST_TOKEN}}#${{icon}}`}} />
    </svg>
  );
}});

{name}.displayName = "{name}";
{prop_types}"""

PROP_TYPES_IMPORT = 'import PropTypes from "prop-types";\n'

PROP_TYPES_TEMPLATE = """
{name}.propTypes = {{
  name: PropTypes.oneOf([
{icon_names}
  ]).isRequired,
}};
"""
