"""Tests for the environment setup generator."""

from inline_snapshot import snapshot

from generators import build_env_file_set, generate_env_setup

ENV_PATHS = [
    "env/env.example.json",
    "env/env.dev.json",
    "env/env.staging.json",
    "env/env.prod.json",
    "src/constants/config.ts",
    "scripts/set-env.js",
]


class TestEnvFileSet:

    def test_paths_in_order(self) -> None:
        assert build_env_file_set("Acme").paths == ENV_PATHS

    def test_title_and_intro(self) -> None:
        file_set = build_env_file_set("Acme")
        assert file_set.title == "Environment Setup для Acme"
        assert file_set.intro == "Створіть наступні файли:"

    def test_hosts_use_slug(self) -> None:
        files = {f.path: f.content for f in build_env_file_set("Acme").files}
        assert '"API_URL": "https://staging-api.acme.com"' in files["env/env.staging.json"]
        assert '"API_URL": "https://api.acme.com"' in files["env/env.prod.json"]
        assert '"API_URL": "http://localhost:3000/api"' in files["env/env.dev.json"]

    def test_multi_word_name_slug(self) -> None:
        files = {f.path: f.content for f in build_env_file_set("My Cool App").files}
        assert "https://staging-api.my-cool-app.com" in files["env/env.staging.json"]

    def test_non_latin_name_falls_back(self) -> None:
        files = {f.path: f.content for f in build_env_file_set("Магазин").files}
        assert "https://api.app.com" in files["env/env.prod.json"]


class TestEnvDocument:

    def test_document_layout(self) -> None:
        result = generate_env_setup("Acme")
        assert result.startswith("# Environment Setup для Acme\n\nСтворіть наступні файли:\n\n")
        assert "## env/env.staging.json\n```json\n" in result
        assert "## scripts/set-env.js\n```js\n" in result

    def test_set_env_script_is_valid_js(self) -> None:
        result = generate_env_setup("Acme")
        assert "const source = `env/env.${env}.json`;" in result
        assert "console.log(`Environment set to: ${env}`);" in result
        assert "\\`" not in result

    def test_notes_follow_files(self) -> None:
        result = generate_env_setup("Acme")
        assert result.index("## scripts/set-env.js") < result.index("## Додати до .gitignore")
        assert result.endswith('"prestart": "npm run env:dev"\n}\n```\n')
        assert "copyFileSync('env/env.staging.json','env/env.json')" in result


class TestFullDocument:
    """Complete rendered document."""

    def test_acme_document(self) -> None:
        assert generate_env_setup("Acme") == snapshot("""\
# Environment Setup для Acme

Створіть наступні файли:

## env/env.example.json
```json
{
  "API_URL": "https://api.example.com",
  "APP_ENV": "development",
  "SENTRY_DSN": "",
  "ANALYTICS_KEY": ""
}
```

## env/env.dev.json
```json
{
  "API_URL": "http://localhost:3000/api",
  "APP_ENV": "development",
  "SENTRY_DSN": "",
  "ANALYTICS_KEY": ""
}
```

## env/env.staging.json
```json
{
  "API_URL": "https://staging-api.acme.com",
  "APP_ENV": "staging",
  "SENTRY_DSN": "",
  "ANALYTICS_KEY": ""
}
```

## env/env.prod.json
```json
{
  "API_URL": "https://api.acme.com",
  "APP_ENV": "production",
  "SENTRY_DSN": "",
  "ANALYTICS_KEY": ""
}
```

## src/constants/config.ts
```tsx
import envConfig from '../../env/env.json';

interface EnvConfig {
  API_URL: string;
  APP_ENV: 'development' | 'staging' | 'production';
  SENTRY_DSN: string;
  ANALYTICS_KEY: string;
}

export function getEnvConfig(): EnvConfig {
  return envConfig as EnvConfig;
}

export const config = {
  get apiUrl() { return getEnvConfig().API_URL; },
  get isDev() { return getEnvConfig().APP_ENV === 'development'; },
  get isProd() { return getEnvConfig().APP_ENV === 'production'; },
};
```

## scripts/set-env.js
```js
const fs = require('fs');
const env = process.env.APP_ENV || 'development';
const source = `env/env.${env}.json`;
const dest = 'env/env.json';

if (fs.existsSync(source)) {
  fs.copyFileSync(source, dest);
  console.log(`Environment set to: ${env}`);
} else {
  console.warn(`Warning: ${source} not found, using example`);
  fs.copyFileSync('env/env.example.json', dest);
}
```

## Додати до .gitignore
```
env/env.json
env/env.dev.json
env/env.staging.json
env/env.prod.json
```

## Додати до package.json scripts
```json
{
  "env:dev": "node -e \\"require('fs').copyFileSync('env/env.dev.json','env/env.json')\\"",
  "env:staging": "node -e \\"require('fs').copyFileSync('env/env.staging.json','env/env.json')\\"",
  "env:prod": "node -e \\"require('fs').copyFileSync('env/env.prod.json','env/env.json')\\"",
  "prestart": "npm run env:dev"
}
```
""")
