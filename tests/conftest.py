import pytest

# Two regular entries: the first scored, the second without a score marker
# (the way promoted entries are listed).
FRONT_PAGE_HTML = """
<!DOCTYPE html>
<html>
<head><title>Hacker News</title></head>
<body>
  <table id="hnmain">
    <tr class="athing" id="1">
      <td class="title"><span class="rank">1.</span></td>
      <td class="title">
        <span class="titleline">
          <a href="https://a.example/post">Post A</a>
          <span class="sitebit comhead"> (<a href="from?site=a.example"><span class="sitestr">a.example</span></a>)</span>
        </span>
      </td>
    </tr>
    <tr>
      <td colspan="2"></td>
      <td class="subtext">
        <span class="subline">
          <span class="score" id="score_1">42 points</span> by <a class="hnuser" href="user?id=alice">alice</a>
          <span class="age" title="2024-01-01T00:00:00">2 hours ago</span>
        </span>
      </td>
    </tr>
    <tr class="athing" id="2">
      <td class="title"><span class="rank">2.</span></td>
      <td class="title"><span class="titleline"><a href="https://b.example/jobs">Post B</a></span></td>
    </tr>
    <tr>
      <td colspan="2"></td>
      <td class="subtext"><span class="age" title="2024-01-01T00:00:00">3 hours ago</span></td>
    </tr>
  </table>
</body>
</html>
"""


@pytest.fixture()
def front_page_html() -> str:
    return FRONT_PAGE_HTML
