import logging

import pytest

from analysis_model.core.config import settings
from analysis_model.core.logging import JSONFormatter

FXCOP_REPORT = """<?xml version="1.0" encoding="utf-8"?>
<FxCopReport Version="1.36">
 <Targets>
  <Target Name="C:/build/Widgets.dll" Format="PE">
   <Modules>
    <Module Name="widgets.dll">
     <Messages>
      <Message TypeName="AssembliesShouldHaveValidStrongNames" Category="Microsoft.Design" CheckId="CA2210">
       <Issue Certainty="95" Level="CriticalError">Sign 'Widgets.dll' with a strong name key.</Issue>
      </Message>
     </Messages>
     <Namespaces>
      <Namespace Name="Company.Widgets">
       <Messages>
        <Message TypeName="AvoidNamespacesWithFewTypes" Category="Microsoft.Design" CheckId="CA1020">
         <Issue Certainty="50" Level="Warning">Consider merging the types defined in 'Company.Widgets'.</Issue>
        </Message>
       </Messages>
       <Types>
        <Type Name="Gauge" Kind="Class">
         <Messages>
          <Message TypeName="IdentifiersShouldBeSpelledCorrectly" Category="Microsoft.Naming" CheckId="CA1704">
           <Issue Certainty="75" Level="CriticalWarning" Path="C:\\src\\widgets" File="Gauge.cs" Line="12">Correct the spelling of 'Gauge'.</Issue>
          </Message>
         </Messages>
         <Members>
          <Member Name="#Render()" Kind="Method">
           <Messages>
            <Message TypeName="DoNotCatchGeneralExceptionTypes" Category="Microsoft.Design" CheckId="CA1031">
             <Issue Certainty="95" Level="Error" Path="C:\\src\\widgets" File="Gauge.cs" Line="40">Modify 'Gauge.Render()' to catch a more specific exception.</Issue>
             <Issue Certainty="95" Level="Error" Path="C:\\src\\widgets" File="Gauge.cs" Line="55">Modify 'Gauge.Render()' to catch a more specific exception.</Issue>
            </Message>
           </Messages>
          </Member>
          <Member Name="#Value" Kind="Property">
           <Accessors>
            <Accessor Name="#get_Value()" Kind="Method">
             <Messages>
              <Message TypeName="PropertiesShouldNotThrow" Category="Microsoft.Design" CheckId="CA1065">
               <Issue Certainty="90" Level="Information" Path="C:\\src\\widgets" File="Gauge.cs" Line="70">'Gauge.Value.get()' throws an exception.</Issue>
              </Message>
             </Messages>
            </Accessor>
           </Accessors>
          </Member>
         </Members>
        </Type>
       </Types>
      </Namespace>
     </Namespaces>
    </Module>
   </Modules>
   <Resources>
    <Resource Name="Widgets.Strings.resources">
     <Messages>
      <Message TypeName="ResourceStringsShouldBeSpelledCorrectly" Category="Microsoft.Naming" CheckId="CA1703">
       <Issue Certainty="75" Level="Warning">Correct the spelling of 'colour' in resource 'Title'.</Issue>
      </Message>
     </Messages>
    </Resource>
   </Resources>
  </Target>
 </Targets>
 <Rules>
  <Rule TypeName="AvoidNamespacesWithFewTypes" Category="Microsoft.Design" CheckId="CA1020">
   <Name>Avoid namespaces with few types</Name>
   <Description>A namespace should generally have more than five types.</Description>
   <Url>http://msdn.microsoft.com/library/ms182130.aspx</Url>
   <MessageLevel Certainty="50">Warning</MessageLevel>
  </Rule>
  <Rule TypeName="DoNotCatchGeneralExceptionTypes" Category="Microsoft.Design" CheckId="CA1031">
   <Name>Do not catch general exception types</Name>
   <Description>General exceptions should not be caught.</Description>
   <Url>http://msdn.microsoft.com/library/ms182137.aspx</Url>
  </Rule>
 </Rules>
</FxCopReport>
"""


@pytest.fixture(autouse=True)
def _use_tmp_output(tmp_path, monkeypatch):
    """Redirect CLI output to a temp directory so tests never write into the repo."""
    monkeypatch.setattr(settings, "OUTPUT_DIR", str(tmp_path / "out"))


@pytest.fixture
def fxcop_report() -> str:
    return FXCOP_REPORT


@pytest.fixture
def fxcop_file(tmp_path):
    p = tmp_path / "fxcop.xml"
    p.write_text(FXCOP_REPORT, encoding="utf-8")
    return p


@pytest.fixture(autouse=True)
def _drop_json_handlers():
    """setup_logging() installs a stdout handler on the root logger; remove it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h.formatter, JSONFormatter):
            root.removeHandler(h)
    root.setLevel(level)
